# SPDX-FileCopyrightText: 2022 B64Codec Team
# SPDX-License-Identifier: Apache-2.0

"""Command-line applications."""
