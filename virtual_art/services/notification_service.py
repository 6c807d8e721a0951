# virtual_art/services/notification_service.py
from virtual_art.celery_worker import celery_app
from virtual_art.utils.logging import get_logger

logger = get_logger(__name__)


class NotificationService:
    """
    Serwis do wysylania powiadomien.
    Uzywa Celery do asynchronicznego przetwarzania.
    """

    @staticmethod
    def send_order_notification(user_id: int, order_id: int, payment_type: str):
        """
        Powiadomienie kupujacego o przyjeciu zamowienia.
        """
        send_order_notification_task.delay(user_id, order_id, payment_type)

    @staticmethod
    def send_status_notification(user_id: int, order_id: int, status: str):
        """
        Powiadomienie o zmianie statusu zamowienia (completed / cancelled).
        """
        send_status_notification_task.delay(user_id, order_id, status)


@celery_app.task(name="virtual_art.services.notification_service.send_order_notification_task")
def send_order_notification_task(user_id: int, order_id: int, payment_type: str):
    """
    Celery task - w prawdziwym systemie wyslalby email/SMS/push.
    Teraz tylko loguje.
    """
    logger.info(f"[NOTIFICATION] User {user_id}: Order {order_id} placed ({payment_type})")
    return {"user_id": user_id, "order_id": order_id, "status": "sent"}


@celery_app.task(name="virtual_art.services.notification_service.send_status_notification_task")
def send_status_notification_task(user_id: int, order_id: int, status: str):
    logger.info(f"[NOTIFICATION] User {user_id}: Order {order_id} is now {status}")
    return {"user_id": user_id, "order_id": order_id, "status": "sent"}


def get_notification_service() -> NotificationService:
    return NotificationService()
