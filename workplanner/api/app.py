"""FastAPI web application for workplanner."""

import logging
from datetime import datetime, timezone
from fastapi import Depends, FastAPI, HTTPException

from workplanner import __version__
from workplanner.api.dependencies import get_now
from workplanner.engine.optimizer import optimize_work_plan
from workplanner.models.plan_request import WorkPlanOptimizeRequest
from workplanner.models.plan_response import WorkPlanOptimizeResponse

logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="workplanner API",
    description="Turns ranked academic work items into a day-by-day study plan",
    version=__version__,
)


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}


@app.post("/work-plan/optimize", response_model=WorkPlanOptimizeResponse)
@app.post("/study-plan/optimize", response_model=WorkPlanOptimizeResponse)
def optimize_plan(
    request: WorkPlanOptimizeRequest,
    now: datetime = Depends(get_now),
):
    """Build a day-by-day work plan from a snapshot of work items and preferences."""
    try:
        return optimize_work_plan(
            request,
            now=now,
            generated_at=datetime.now(timezone.utc),
        )
    except Exception as e:
        logger.error(f"Failed to optimize work plan: {type(e).__name__}: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Failed to optimize work plan: {str(e)}")


if __name__ == "__main__":
    import uvicorn
    from workplanner.config import HOST, PORT
    uvicorn.run(app, host=HOST, port=PORT)
