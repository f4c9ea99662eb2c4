# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .bearer import BearerAuthenticator, auth_required, bearer_token

__all__ = ["BearerAuthenticator", "auth_required", "bearer_token"]
