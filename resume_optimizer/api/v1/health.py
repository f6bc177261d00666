from fastapi import APIRouter

from resume_optimizer.taxonomy import get_default_vocabulary

router = APIRouter()


@router.get("/health", summary="Health Check", description="Check the health status of the application.")
async def health_check():
    return {"status": "healthy", "vocabulary_size": len(get_default_vocabulary().skills)}
