from dotenv import load_dotenv
from fastapi import FastAPI

from frontend_fastapi.api.routes.pages import router as pages_router

# Load environment variables from .env file
load_dotenv()

app = FastAPI(title="Task Manager Client", docs_url=None, redoc_url=None)

app.include_router(pages_router)
