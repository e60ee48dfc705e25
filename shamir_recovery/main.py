import logging
import os
from fastapi import FastAPI
from shamir_recovery.api import reconstruct
from shamir_recovery.services.database_service import create_db_and_tables, test_connection
from contextlib import asynccontextmanager


logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())


@asynccontextmanager
async def lifespan(app: FastAPI):
    test_connection()
    create_db_and_tables()
    yield
    
app = FastAPI(lifespan=lifespan)

app.include_router(reconstruct.router, prefix="/reconstruct", tags=["reconstruct"])
