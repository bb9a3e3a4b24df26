# app/api/routes.py
from fastapi import APIRouter

router = APIRouter(prefix="/v1")

@router.get("/health")
def health():
    # Liveness only; deliberately does not touch the database
    return {"ok": True}
