# -*- coding: utf-8 -*-
from __future__ import annotations

import typing as t
from dataclasses import dataclass
from enum import Enum


class TargetKind(str, Enum):
    """Which target a solve was run for."""
    DESIRED = "desired"
    PASSING = "passing"


@dataclass(frozen=True)
class AllCompleted:
    """Nothing is pending, so the overall grade is fixed."""
    current_grade: float
    kind: t.Literal["all_completed"] = "all_completed"


@dataclass(frozen=True)
class AlreadyAchieved:
    """The target is met regardless of how the remaining work goes."""
    current_grade: float
    needed_average: float
    kind: t.Literal["already_achieved"] = "already_achieved"


@dataclass(frozen=True)
class Infeasible:
    """The remaining work would need more than 100% on average."""
    needed_average: float
    kind: t.Literal["infeasible"] = "infeasible"


@dataclass(frozen=True)
class SingleRemaining:
    """One category is pending and needs ``needed_average``."""
    needed_average: float
    category_name: str
    kind: t.Literal["single_remaining"] = "single_remaining"


@dataclass(frozen=True)
class MultipleRemaining:
    """Several categories are pending; one flat average across all of them."""
    needed_average: float
    kind: t.Literal["multiple_remaining"] = "multiple_remaining"


GradeTargetResult = t.Union[AllCompleted, AlreadyAchieved, Infeasible, SingleRemaining, MultipleRemaining]


@dataclass(frozen=True)
class GradeSummary:
    """Where a course grade stands right now."""
    earned_points: float
    completed_weight: float
    remaining_weight: float
    total_weight: float
    completed_average: t.Optional[float]  # None until some weight is completed


@dataclass(frozen=True)
class GradePlan:
    """Solver results for the desired target and, optionally, the passing target."""
    desired_percent: float
    desired: GradeTargetResult
    passing_percent: t.Optional[float] = None
    passing: t.Optional[GradeTargetResult] = None

    def results(self) -> dict[TargetKind, GradeTargetResult]:
        """Results keyed by target kind, skipping the passing target when absent."""
        out: dict[TargetKind, GradeTargetResult] = {TargetKind.DESIRED: self.desired}
        if self.passing is not None:
            out[TargetKind.PASSING] = self.passing
        return out
