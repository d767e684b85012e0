"""
进程内事件总线
服务在事务提交后发布领域事件，订阅者在发布线程内依次执行
"""
from collections import defaultdict, deque
from dataclasses import dataclass, field
from datetime import datetime
from itertools import islice
from typing import Any, Callable, Dict, List, Optional
import logging
import threading
import uuid

logger = logging.getLogger(__name__)

Handler = Callable[["Event"], None]


@dataclass
class Event:
    """已发布的领域事件"""
    event_type: str
    data: Dict[str, Any]
    source: str
    timestamp: datetime = field(default_factory=datetime.now)
    event_id: str = field(default_factory=lambda: uuid.uuid4().hex)


class EventBus:
    """
    发布/订阅总线

    订阅表与历史记录由同一把锁保护，处理器在锁外执行，
    单个处理器抛错只记日志。
    """

    def __init__(self, history_size: int = 100):
        self._handlers: Dict[str, List[Handler]] = defaultdict(list)
        self._history: deque = deque(maxlen=history_size)
        self._lock = threading.RLock()

    def subscribe(self, event_type: str, handler: Handler) -> None:
        """同一处理器对同一事件只登记一次"""
        with self._lock:
            if handler not in self._handlers[event_type]:
                self._handlers[event_type].append(handler)
                logger.debug(f"{handler.__name__} listening on {event_type}")

    def unsubscribe(self, event_type: str, handler: Handler) -> None:
        with self._lock:
            if handler in self._handlers.get(event_type, ()):
                self._handlers[event_type].remove(handler)

    def publish(self, event: Event) -> None:
        with self._lock:
            self._history.append(event)
            handlers = list(self._handlers.get(event.event_type, ()))

        for handler in handlers:
            try:
                handler(event)
            except Exception:
                logger.exception(f"{handler.__name__} failed on {event.event_type} ({event.event_id})")

    def get_history(self, event_type: Optional[str] = None, limit: int = 50) -> List[Event]:
        """最近发布的事件，最新在前"""
        with self._lock:
            recent = reversed(list(self._history))
        if event_type:
            recent = (e for e in recent if e.event_type == event_type)
        return list(islice(recent, limit))

    def clear_subscribers(self) -> None:
        with self._lock:
            self._handlers.clear()

    def clear_history(self) -> None:
        with self._lock:
            self._history.clear()


# 应用共用的总线
event_bus = EventBus()


def make_event(event_type, data, source: str) -> Event:
    """把事件数据对象包装成 Event"""
    return Event(
        event_type=getattr(event_type, "value", event_type),
        data=data.to_dict(),
        source=source,
        timestamp=data.timestamp,
    )
