#!/usr/bin/env python3
"""Run the maintenance alert email digest once (same job as GET /api/cron/notifications).

Usage:
    python scripts/run_notification_digest.py

Exits 0 when the batch completed (even if some sends failed), 1 on failure.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from captainslog.db.session import SessionLocal
from captainslog.services.digest import run_notification_digest


def main() -> int:
    db = SessionLocal()
    try:
        result = run_notification_digest(db)
        print(
            f"message={result.message!r} "
            f"sent={result.sent} "
            f"total_alerts={result.total_alerts}"
        )
        for r in result.results:
            if r.error:
                print(f"  user_id={r.user_id} error={r.error}", file=sys.stderr)
        return 0
    except Exception as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
