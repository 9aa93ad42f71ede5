# socialgraph/main.py

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from socialgraph.core.config import settings
from socialgraph.core.errors import SocialGraphError
from socialgraph.db.base_class import Base
from socialgraph.db.session import engine

# Every model must be imported before create_all so its table is registered
from socialgraph.models.account import Account  # noqa: F401
from socialgraph.models.follow import FollowEdge  # noqa: F401
from socialgraph.models.follow_request import FollowRequest  # noqa: F401
from socialgraph.models.restriction import Restriction  # noqa: F401
from socialgraph.models.close_friend import CloseFriend  # noqa: F401
from socialgraph.models.privacy import PrivacySettings  # noqa: F401

from socialgraph.routers import relationships, follow_requests, restrictions, close_friends, privacy

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

Base.metadata.create_all(bind=engine)

app = FastAPI(title="Social Graph")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(SocialGraphError)
async def social_graph_error_handler(request: Request, exc: SocialGraphError):
    logger.debug("%s %s -> %s: %s", request.method, request.url.path, type(exc).__name__, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "error": type(exc).__name__},
    )

app.include_router(relationships.router, prefix="/api/v1/relationships", tags=["relationships"])
app.include_router(follow_requests.router, prefix="/api/v1/follow-requests", tags=["follow-requests"])
app.include_router(restrictions.router, prefix="/api/v1/restrictions", tags=["restrictions"])
app.include_router(close_friends.router, prefix="/api/v1/close-friends", tags=["close-friends"])
app.include_router(privacy.router, prefix="/api/v1/privacy", tags=["privacy"])

@app.get("/")
def read_root():
    return {"message": "Social graph API is running!"}
