# File: silence_splitter/core/database/base.py

from sqlalchemy.orm import declarative_base

# The shared registry. Every ledger table inherits from this.
Base = declarative_base()
