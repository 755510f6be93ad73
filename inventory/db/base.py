from sqlalchemy.orm import declarative_base

SCHEMA_VERSION = 1

Base = declarative_base()
