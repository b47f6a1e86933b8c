import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from smarteam.core.settings import settings
from smarteam.errors import register_exception_handlers
from smarteam.routers.auth import router as auth_router
from smarteam.routers.users import router as users_router
from smarteam.startup import lifespan

app = FastAPI(title=settings.app_name, debug=settings.debug, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(auth_router, prefix="/api/auth", tags=["auth"])
app.include_router(users_router, prefix="/api", tags=["users"])


@app.get("/health")
def health_check():
    return {"status": "ok"}


def run() -> None:
    uvicorn.run("smarteam.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
