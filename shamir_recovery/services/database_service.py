import os
from dotenv import load_dotenv
from sqlmodel import create_engine, Session, text
from sqlmodel import SQLModel


load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./reconstructions.db")
DATABASE_ECHO = os.getenv("DATABASE_ECHO", "").lower() in ("1", "true", "yes")

# FastAPI serves sync endpoints from a threadpool
connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(DATABASE_URL, echo=DATABASE_ECHO, connect_args=connect_args)

def get_session():
    with Session(engine) as session:
        yield session

def create_db_and_tables():
    SQLModel.metadata.create_all(engine)

def test_connection():
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))
