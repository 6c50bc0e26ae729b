"""
FastAPI service for grade targets and study planning.

Exposes the grade target solver, the study priority ranker, the weekly to-do
list and lecture generation as REST endpoints. Every operation is a pure
computation over the request body, so the service keeps no state.
"""
from __future__ import annotations

import datetime as dt
import logging

from fastapi import FastAPI, HTTPException

from coursework.config import SERVICE_HOST, SERVICE_PORT
from coursework.dates import week_bounds
from grade_planner.models import TargetKind
from grade_planner.solver import grade_summary, plan_grade_targets, solve_final_exam_target
from services.shared.convert import (
    from_event,
    from_grade_result,
    from_grade_summary,
    from_recommendation_list,
    from_todo_items,
    to_category,
    to_course,
    to_event,
)
from services.shared.models import (
    FinalExamRequest,
    GenerateLecturesRequest,
    GenerateLecturesResponse,
    GradePlanResponse,
    GradeTargetRequest,
    RecommendationListResponse,
    StudyRecommendationsRequest,
    WeeklyTodoRequest,
    WeeklyTodoResponse,
)
from study_planner.lectures import generate_lecture_events, parse_lecture_times
from study_planner.ranker import rank_study_priorities
from study_planner.weekly import build_weekly_todo

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Academic Co-pilot Service",
    description="REST API for grade targets, study priorities and weekly to-do lists",
    version="1.0.0",
)


@app.get("/health")
async def health_check():
    """Health check endpoint for container orchestration."""
    return {"status": "healthy", "service": "copilot-service"}


@app.post("/grades/target", response_model=GradePlanResponse)
def solve_grade_targets(request: GradeTargetRequest) -> GradePlanResponse:
    """
    Solve for the average needed on pending categories to reach the desired
    grade and, when given, the passing grade.
    """
    try:
        categories = [to_category(c) for c in request.categories]
        plan = plan_grade_targets(categories, request.target_percent, request.passing_percent)
        return GradePlanResponse(
            desired=from_grade_result(plan.desired, request.target_percent),
            passing=(
                from_grade_result(plan.passing, request.passing_percent, TargetKind.PASSING)
                if plan.passing is not None else None
            ),
            summary=from_grade_summary(grade_summary(categories)),
        )
    except Exception as e:
        logger.exception("Grade target solve failed")
        raise HTTPException(status_code=500, detail=f"Error solving grade target: {str(e)}")


@app.post("/grades/final-exam", response_model=GradePlanResponse)
def solve_final_exam(request: FinalExamRequest) -> GradePlanResponse:
    """Score needed on the final exam, given the grade on everything before it."""
    try:
        desired = solve_final_exam_target(request.current_grade, request.final_weight, request.target_percent)
        passing = None
        if request.passing_percent is not None:
            passing = from_grade_result(
                solve_final_exam_target(request.current_grade, request.final_weight, request.passing_percent),
                request.passing_percent,
                TargetKind.PASSING,
            )
        return GradePlanResponse(
            desired=from_grade_result(desired, request.target_percent),
            passing=passing,
        )
    except Exception as e:
        logger.exception("Final exam solve failed")
        raise HTTPException(status_code=500, detail=f"Error solving final exam target: {str(e)}")


@app.post("/study/recommendations", response_model=RecommendationListResponse)
def study_recommendations(request: StudyRecommendationsRequest) -> RecommendationListResponse:
    """
    Rank the events inside the horizon and recommend study hours.

    An empty recommendation list is a normal response, not an error.
    """
    try:
        result = rank_study_priorities(
            events=[to_event(e) for e in request.events],
            courses=[to_course(c) for c in request.courses],
            today=request.today or dt.date.today(),
            horizon_days=request.horizon_days,
            custom_hours=request.custom_hours,
        )
        return from_recommendation_list(result)
    except Exception as e:
        logger.exception("Study ranking failed")
        raise HTTPException(status_code=500, detail=f"Error ranking study priorities: {str(e)}")


@app.post("/study/weekly-todo", response_model=WeeklyTodoResponse)
def weekly_todo(request: WeeklyTodoRequest) -> WeeklyTodoResponse:
    """Prioritized to-do list for the current Sunday-Saturday week."""
    try:
        today = request.today or dt.date.today()
        items = build_weekly_todo(
            [to_event(e) for e in request.events],
            [to_course(c) for c in request.courses],
            today,
        )
        return from_todo_items(items, week_bounds(today))
    except Exception as e:
        logger.exception("Weekly to-do failed")
        raise HTTPException(status_code=500, detail=f"Error building weekly to-do list: {str(e)}")


@app.post("/lectures/generate", response_model=GenerateLecturesResponse)
def generate_lectures(request: GenerateLecturesRequest) -> GenerateLecturesResponse:
    """Expand a lecture schedule string into one event per lecture."""
    if parse_lecture_times(request.lecture_times) is None:
        raise HTTPException(
            status_code=422,
            detail=f"Could not parse lecture times: {request.lecture_times!r}",
        )
    events = generate_lecture_events(
        request.course_id,
        request.course_name,
        request.lecture_times,
        request.semester_start,
        request.semester_end,
    )
    return GenerateLecturesResponse(events=[from_event(e) for e in events])


if __name__ == "__main__":
    import uvicorn

    from coursework.logging_setup import configure_logging

    configure_logging()
    uvicorn.run(app, host=SERVICE_HOST, port=SERVICE_PORT)
