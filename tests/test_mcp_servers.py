"""Tests for the MCP tool servers, called in-memory through a FastMCP client."""
import json

import pytest
from fastmcp import Client

from grade_planner.server import mcp as grade_mcp
from study_planner.server import mcp as study_mcp

CATEGORIES = [
    {"id": "hw", "name": "Homework", "weight": 60, "current_score": 85, "is_completed": True},
    {"id": "final", "name": "Final", "weight": 40},
]

COURSES = [{"id": "c1", "name": "Calculus", "code": "MATH101"}]

EVENTS = [
    {"id": "e1", "title": "Midterm 2", "date": "2026-10-23", "type": "exam", "weight_percent": 30, "course_id": "c1"},
    {"id": "q1", "title": "Quiz 3", "date": "2026-10-20", "type": "quiz", "course_id": "c1"},
]


@pytest.mark.asyncio
async def test_grade_planner_tools_are_registered() -> None:
    """All grade planner tools are exposed."""
    async with Client(grade_mcp) as client:
        tools = {tool.name for tool in await client.list_tools()}

    assert tools == {"solve_grade_target", "solve_final_exam_target", "show_grade_plan"}


@pytest.mark.asyncio
async def test_solve_grade_target_tool() -> None:
    """The structured result carries its kind tag."""
    async with Client(grade_mcp) as client:
        result = await client.call_tool("solve_grade_target", {"categories": CATEGORIES, "target_percent": 90})

    data = json.loads(result.content[0].text)
    assert data["kind"] == "single_remaining"
    assert data["needed_average"] == pytest.approx(97.5)
    assert data["category_name"] == "Final"


@pytest.mark.asyncio
async def test_solve_final_exam_target_tool() -> None:
    async with Client(grade_mcp) as client:
        result = await client.call_tool(
            "solve_final_exam_target",
            {"current_grade": 50, "final_weight": 20, "target_percent": 95},
        )

    data = json.loads(result.content[0].text)
    assert data["kind"] == "infeasible"
    assert data["needed_average"] == pytest.approx(275)


@pytest.mark.asyncio
async def test_show_grade_plan_tool() -> None:
    """Displays both targets in plain text."""
    async with Client(grade_mcp) as client:
        result = await client.call_tool(
            "show_grade_plan",
            {"categories": CATEGORIES, "desired_percent": 90, "passing_percent": 50},
        )

    text = result.content[0].text
    assert "🎯 GRADE PLAN" in text
    assert "[desired] You need 97.50% (A+) on Final to finish with 90%." in text
    assert "[passing] ✅ Already there" in text


@pytest.mark.asyncio
async def test_study_planner_tools_are_registered() -> None:
    """All study planner tools are exposed."""
    async with Client(study_mcp) as client:
        tools = {tool.name for tool in await client.list_tools()}

    assert tools == {
        "rank_study_priorities",
        "build_weekly_todo",
        "generate_lecture_events",
        "show_study_plan",
        "show_weekly_todo",
    }


@pytest.mark.asyncio
async def test_rank_study_priorities_tool() -> None:
    async with Client(study_mcp) as client:
        result = await client.call_tool(
            "rank_study_priorities",
            {"events": EVENTS, "courses": COURSES, "today": "2026-10-19"},
        )

    data = json.loads(result.content[0].text)
    assert [r["event_id"] for r in data["recommendations"]] == ["e1", "q1"]
    assert data["urgent_count"] == 2


@pytest.mark.asyncio
async def test_show_study_plan_tool() -> None:
    """Renders the ranked table with totals."""
    async with Client(study_mcp) as client:
        result = await client.call_tool(
            "show_study_plan",
            {"events": EVENTS, "courses": COURSES, "today": "2026-10-19"},
        )

    text = result.content[0].text
    assert "📚 STUDY RECOMMENDATIONS" in text
    assert "Quiz in 1 day - High priority" in text
    assert "Total: 4.5h across 2 item(s), 2 urgent" in text


@pytest.mark.asyncio
async def test_show_study_plan_tool_when_nothing_is_due() -> None:
    async with Client(study_mcp) as client:
        result = await client.call_tool(
            "show_study_plan",
            {"events": EVENTS, "courses": COURSES, "today": "2026-12-01", "horizon_days": 7},
        )

    assert result.content[0].text == "📚 Nothing due in the next 7 days. Good time to review and catch up."


@pytest.mark.asyncio
async def test_show_weekly_todo_tool() -> None:
    async with Client(study_mcp) as client:
        result = await client.call_tool(
            "show_weekly_todo",
            {"events": EVENTS, "courses": COURSES, "today": "2026-10-19"},
        )

    text = result.content[0].text
    assert "✅ THIS WEEK" in text
    assert "Study for Midterm 2" in text
    assert "Total: 3 item(s)" in text


@pytest.mark.asyncio
async def test_generate_lecture_events_tool() -> None:
    async with Client(study_mcp) as client:
        result = await client.call_tool(
            "generate_lecture_events",
            {
                "course_id": "cs101",
                "course_name": "Intro to CS",
                "lecture_times": "Tue/Thu 2:00-3:15 PM",
                "semester_start": "2026-09-07",
                "semester_end": "2026-09-13",
            },
        )

    events = json.loads(result.content[0].text)
    assert [e["id"] for e in events] == ["cs101-lecture-2026-09-08", "cs101-lecture-2026-09-10"]
    assert events[0]["description"] == "2:00 PM - 3:15 PM"
