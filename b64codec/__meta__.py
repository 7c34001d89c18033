# SPDX-FileCopyrightText: 2022 B64Codec Team
# SPDX-License-Identifier: Apache-2.0

"""Package metadata for b64codec."""


__appname__     = 'b64codec'
__version__     = '0.3.0'
__authors__     = ['Alin Tomescu <tomescu.alin@gmail.com>', ]
__developer__   = 'Alin Tomescu'
__contact__     = 'tomescu.alin@gmail.com'
__license__     = 'Apache License 2.0'
__website__     = 'https://github.com/alinush/b64codec'
__copyright__   = 'B64Codec Team 2011-2022'
__description__ = 'Base64 encoding and decoding for buffers and files.'
__keywords__    = 'base64 encoding decoding codec command-line'
