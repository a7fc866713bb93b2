# Copyright (C) 2025-2026 Burn-My-Windows Contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
# See LICENSE for the full text.

"""Preferences application for the Burn-My-Windows close effects."""

__version__ = "2.0.0"
