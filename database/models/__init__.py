from .base import Base
from .user import User
from .interview import Interview
from .company import Company
from .buddy import BuddyMatch, BuddyMockInterview, StudyGroup, StudyGroupMember
from .calendar import PreparationCalendar, CalendarMilestone, DailyPractice
from .question import RealQuestion, QuestionVote

__all__ = [
    'Base',
    'User',
    'Interview',
    'Company',
    'BuddyMatch',
    'BuddyMockInterview',
    'StudyGroup',
    'StudyGroupMember',
    'PreparationCalendar',
    'CalendarMilestone',
    'DailyPractice',
    'RealQuestion',
    'QuestionVote',
]
