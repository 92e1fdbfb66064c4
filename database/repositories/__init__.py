from database.repositories.base import BaseRepository
from database.repositories.user import UserRepository
from database.repositories.interview import InterviewRepository
from database.repositories.company import CompanyRepository
from database.repositories.buddy import BuddyMatchRepository
from database.repositories.study_group import StudyGroupRepository
from database.repositories.calendar import CalendarRepository
from database.repositories.question import QuestionRepository

__all__ = [
    'BaseRepository',
    'UserRepository',
    'InterviewRepository',
    'CompanyRepository',
    'BuddyMatchRepository',
    'StudyGroupRepository',
    'CalendarRepository',
    'QuestionRepository',
]
