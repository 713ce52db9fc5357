"""
Test configuration: environment must be set before any userauth import.

JWT_SECRET has no default, so it is set here. DATABASE_URL points at a single
in-memory SQLite database shared by all connections (StaticPool); test classes
recreate the schema in setUp. BCRYPT_ROUNDS is lowered to keep hashing fast.
"""

import os

os.environ["APP_ENV"] = "dev"
os.environ["JWT_SECRET"] = "test-secret-not-for-production-use-0123456789"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["ALLOW_USER_RESET"] = "false"
os.environ["API_PREFIX"] = "/api"
