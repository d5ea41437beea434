#!/usr/bin/env python3

# Copyright (C) 2024-2026 The ecarith developers
#
# This file is part of ecarith. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecarith including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the ecarith package."

name = "ecarith"
__version__ = "2026.10.1"
__author__ = "The ecarith developers"
__author_email__ = "devs@ecarith.org"
__copyright__ = "Copyright (C) 2024-2026 The ecarith developers"
__license__ = "MIT License"
