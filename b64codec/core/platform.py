# SPDX-FileCopyrightText: 2022 B64Codec Team
# SPDX-License-Identifier: Apache-2.0

"""Runtime files and folders."""


# standard libs
import os

# external libs
from cmdkit.config import Namespace

# public interface
__all__ = ['cwd', 'home', 'root', 'path', 'default_path', ]


cwd = os.getcwd()
home = os.getenv('HOME')
root = os.getuid() == 0
path = Namespace({
    'system': {
        'log': '/var/log/b64codec',
        'config': '/etc/b64codec.toml'},
    'user': {
        'log': f'{home}/.b64codec/log',
        'config': f'{home}/.b64codec/config.toml'},
    'local': {
        'log': f'{cwd}/.b64codec/log',
        'config': f'{cwd}/.b64codec/config.toml'},
})


# Traceback files are written under this log directory (created on demand)
default_path = path.system if root else path.user
