from .base import Base

from .user import User
from .pet import Pet
from .daily_task import DailyTask
from .preventative import Preventative
from .service_task import ServiceTask
from .task_completion import TaskCompletion, TaskType
