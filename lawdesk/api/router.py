from fastapi import APIRouter

from lawdesk.api.approvals import approvals_router
from lawdesk.api.leave import leave_router
from lawdesk.api.team import team_router

api_router = APIRouter()
api_router.include_router(leave_router)
api_router.include_router(approvals_router)
api_router.include_router(team_router)
