"""Business logic services."""

from .recommendation_service import RecommendationService
from .buddy_service import BuddyService
from .study_group_service import StudyGroupService
from .calendar_service import CalendarService
from .question_service import QuestionService
