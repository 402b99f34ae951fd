#!/usr/bin/env python3
"""
Connection Check Script

Run this to verify the database and the resume upload directory.
Usage: python scripts/check_connections.py
"""
import os
import sys
sys.path.insert(0, '.')

from sqlalchemy.engine import make_url

from satrecruit.core.config import get_settings
from satrecruit.db.session import test_db_connection
from satrecruit.utils.file_upload import ensure_upload_dir


def main():
    settings = get_settings()
    print("=" * 50)
    print("RECRUITMENT API - CONNECTION CHECK")
    print("=" * 50)

    # Database
    print("\n[1] Testing database...")
    if settings.database_url:
        print(f"    URL: {make_url(settings.database_url).render_as_string(hide_password=True)}")
        if test_db_connection():
            print("    ✅ Database: CONNECTED")
        else:
            print("    ❌ Database: FAILED")
    else:
        print("    ❌ Database: DATABASE_URL not configured")

    # Upload directory
    print("\n[2] Testing upload directory...")
    print(f"    Path: {settings.upload_path}")
    try:
        path = ensure_upload_dir()
        if os.access(path, os.W_OK):
            print("    ✅ Uploads: WRITABLE")
        else:
            print("    ❌ Uploads: NOT WRITABLE")
    except OSError as e:
        print(f"    ❌ Uploads: {e}")

    print("\n" + "=" * 50)
    print("Connection check complete!")
    print("=" * 50)


if __name__ == "__main__":
    main()
