# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from time import perf_counter

from sqlalchemy import text

from expense_tracker.infrastructure.db import ENGINE


def check_database() -> dict[str, object]:
    """Round-trip a trivial query; raises if the database is unreachable."""

    t0 = perf_counter()
    with ENGINE.connect() as connection:
        connection.execute(text("SELECT 1"))
    return {
        "ok": True,
        "dialect": ENGINE.dialect.name,
        "latency_ms": round((perf_counter() - t0) * 1000, 1),
    }


__all__ = ["check_database"]
