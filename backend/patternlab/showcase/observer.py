"""
Observer Pattern

NewsAgency pushes every new piece of news to its registered channels, in
registration order, on the caller's thread.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional
import logging

from patternlab.core.config_manager import config_manager
from patternlab.decorators.traced import traced

logger = logging.getLogger(__name__)


class Channel(ABC):
    @abstractmethod
    def update(self, news: Any) -> None:
        ...


class NewsChannel(Channel):
    def __init__(self, name: str = "channel"):
        self.name = name
        self.news: Optional[Any] = None

    def update(self, news: Any) -> None:
        self.news = news

    def __repr__(self) -> str:
        return f"NewsChannel({self.name!r})"


class NewsAgency:
    """
    Subject holding an ordered list of channel references.

    The agency does not own its channels. The same channel may be registered
    more than once and is then notified once per registration.

    Args:
        isolate_failures: When True, an exception raised by one channel is
            logged and the remaining channels are still notified. When False
            (the default) the exception propagates out of ``set_news``.
    """

    def __init__(self, isolate_failures: bool = False):
        self._channels: List[Channel] = []
        self._news: Optional[Any] = None
        self._isolate_failures = isolate_failures

    @property
    def news(self) -> Optional[Any]:
        return self._news

    @property
    def observers(self) -> List[Channel]:
        return list(self._channels)

    def add_observer(self, channel: Channel) -> None:
        self._channels.append(channel)

    def remove_observer(self, channel: Channel) -> None:
        """Remove the first registration of ``channel``, if any."""
        for index, registered in enumerate(self._channels):
            if registered is channel:
                del self._channels[index]
                return
        logger.debug(f"remove_observer: {channel!r} is not registered")

    def set_news(self, news: Any) -> None:
        self._news = news
        for channel in list(self._channels):
            if not self._isolate_failures:
                channel.update(news)
                continue
            try:
                channel.update(news)
            except Exception:
                logger.exception(f"Observer {channel!r} failed to handle news update")


@traced(label="observer")
def demonstrate() -> None:
    agency = NewsAgency(isolate_failures=config_manager.should_isolate_observer_failures())
    first, second = NewsChannel("first"), NewsChannel("second")
    agency.add_observer(first)
    agency.add_observer(second)

    agency.set_news("news")
    print(f"first: {first.news}; second: {second.news}")

    agency.remove_observer(second)
    agency.set_news("more news")
    print(f"first: {first.news}; second: {second.news}")
