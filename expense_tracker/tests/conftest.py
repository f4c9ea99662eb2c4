from __future__ import annotations

import os
import tempfile

_TMP = tempfile.mkdtemp(prefix="expense-tracker-tests-")

os.environ.setdefault("DATABASE_URL", f"sqlite:///{os.path.join(_TMP, 'test.db')}")
os.environ.setdefault("LOG_FILE", os.path.join(_TMP, "app.log"))
os.environ.setdefault("APP_ENV", "test")
