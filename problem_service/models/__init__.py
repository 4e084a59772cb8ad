from problem_service.models.topic import Topic
from problem_service.models.problem import Problem

__all__ = ['Topic', 'Problem']
