from fastapi import APIRouter

from spamguard.api.check import router as check_router

api_router = APIRouter()

# API routes at /api/*
api_router.include_router(check_router, prefix="/api", tags=["check"])
