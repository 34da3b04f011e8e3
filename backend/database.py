from sqlalchemy.orm import declarative_base

# Declarative base shared by every entity in models.py. Engines and sessions
# belong to the persistence layer that loads the entities.
Base = declarative_base()
