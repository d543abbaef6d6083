"""Demo: exercise every pattern in order and print the results to stdout."""

from patterns.animal_factory import create_animal
from patterns.config import DemoConfig
from patterns.email_notifier import EmailNotifier
from patterns.log_sink import LogSink
from patterns.notification_service import NotificationService
from patterns.observability import configure_logging
from patterns.sms_notifier import SmsNotifier
from patterns.sorter import Sorter
from patterns.sorting import BubbleSort, QuickSort
from patterns.user import User


def main() -> None:
    config = DemoConfig.from_env()
    configure_logging(config.log_level)

    # Singleton
    LogSink.instance().log("Це повідомлення від Singleton.")

    # Factory Method
    dog = create_animal("dog")
    dog.speak()

    cat = create_animal("cat")
    cat.speak()

    # Observer
    service = NotificationService()
    user1 = User("Іван")
    user2 = User("Оксана")

    service.subscribe(user1)
    service.subscribe(user2)
    service.notify("Нова подія на сайті!")

    # Decorator
    notifier = EmailNotifier()
    notifier = SmsNotifier(notifier)
    notifier.send("Ваше замовлення доставлено.")

    # Strategy
    numbers = [5, 2, 9, 1, 5, 6]
    sorter = Sorter(BubbleSort())
    sorter.sort(numbers)

    sorter.set_strategy(QuickSort())
    sorter.sort(numbers)

    for num in numbers:
        print(num)


if __name__ == "__main__":
    main()
