"""Five classic design patterns (Singleton, Factory Method, Observer, Decorator, Strategy)."""

from patterns.log_sink import LogSink
from patterns.animal import Animal, Cat, Dog
from patterns.animal_factory import AnimalFactory, create_animal
from patterns.observer import Observer
from patterns.user import User
from patterns.notification_service import NotificationService
from patterns.notifier import Notifier
from patterns.email_notifier import EmailNotifier
from patterns.sms_notifier import SmsNotifier
from patterns.sorting import BubbleSort, QuickSort, SortingStrategy
from patterns.sorter import Sorter
from patterns.errors import InvalidArgumentError, PatternsError

__all__ = [
    "LogSink",
    "Animal",
    "Dog",
    "Cat",
    "AnimalFactory",
    "create_animal",
    "Observer",
    "User",
    "NotificationService",
    "Notifier",
    "EmailNotifier",
    "SmsNotifier",
    "SortingStrategy",
    "BubbleSort",
    "QuickSort",
    "Sorter",
    "PatternsError",
    "InvalidArgumentError",
]
