from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health", summary="Health Check", description="Check the health status and analysis mode of the application.")
async def health_check(request: Request):
    generator = getattr(request.app.state, "generator", None)
    return {"status": "healthy", "mode": generator.mode if generator else "starting"}
