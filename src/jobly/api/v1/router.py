from fastapi import APIRouter

from jobly.api.v1 import companies, health, jobs

api_v1_router = APIRouter()
api_v1_router.include_router(health.router)
api_v1_router.include_router(companies.router)
api_v1_router.include_router(jobs.router)
