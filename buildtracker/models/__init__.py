from sqlalchemy.orm import declarative_base

Base = declarative_base()


def initialize_sql(engine):
    Base.metadata.create_all(engine)
