"""Aggregate API v1 router."""

from fastapi import APIRouter

from loto_analytics.api.v1.endpoints import analysis

api_router = APIRouter()

api_router.include_router(analysis.router, prefix="/analysis", tags=["Análise"])
