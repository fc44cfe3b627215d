from threading import Event

from hotel_search.shared.domain.exception import OperationCancelledException


def raise_if_cancelled(cancel_event: Event | None, operation: str) -> None:
    """キャンセルが要求されていれば OperationCancelledException を送出する"""
    if cancel_event is not None and cancel_event.is_set():
        raise OperationCancelledException(f"Operation cancelled: {operation}")
