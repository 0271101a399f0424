import logging
import time

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from ...database import UserStore
from ...utils.custom_exception import StoreError

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    """Command - проверка доступности хранилища при старте сервиса."""

    help = "Ping the users store with a bounded timeout, retrying on failure."

    def add_arguments(self, parser) -> None:
        parser.add_argument(
            "--retries",
            type=int,
            default=settings.STORE_PING_RETRIES,
        )
        parser.add_argument(
            "--delay",
            type=float,
            default=settings.STORE_PING_DELAY_SEC,
        )
        parser.add_argument(
            "--timeout",
            type=float,
            default=settings.STORE_PING_TIMEOUT_SEC,
        )

    def handle(self, *args, **options) -> None:
        store = UserStore(timeout=options["timeout"])
        attempts = max(1, options["retries"])

        for attempt in range(1, attempts + 1):
            try:
                store.ping()

            except StoreError as ex:
                logger.warning(
                    f"Store not ready (attempt {attempt}/{attempts}): "
                    f"{ex.__class__.__name__}"
                )
                if attempt < attempts:
                    time.sleep(options["delay"])
                continue

            self.stdout.write(self.style.SUCCESS("Store is ready"))
            return

        raise CommandError(f"Store unavailable after {attempts} attempts")
