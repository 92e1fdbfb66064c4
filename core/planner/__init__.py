from core.planner.milestones import (
    MilestonePlan,
    days_between,
    generate_milestones,
    daily_recommendations,
    calculate_progress,
    next_milestone,
)

__all__ = [
    'MilestonePlan',
    'days_between',
    'generate_milestones',
    'daily_recommendations',
    'calculate_progress',
    'next_milestone',
]
