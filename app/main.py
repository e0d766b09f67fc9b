from fastapi import FastAPI

from app.settings import settings

from .error_handlers import register_error_handlers
from .routes import home, images

app = FastAPI(title="FlexFrame", version=settings.VERSION)

register_error_handlers(app)

app.include_router(home.router)
app.include_router(images.router)
