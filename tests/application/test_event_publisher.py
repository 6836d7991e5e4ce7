"""Tests for the in-process event publisher."""

from uuid import uuid4

from pos.application.event_publisher import EventPublisher
from pos.domain.events import DomainEvent, SaleCancelled, SaleCompleted
from tests.fakes import FailingSubscriber, RecordingSubscriber


class TestEventPublisher:

    def test_routes_by_event_type(self):
        publisher = EventPublisher()
        completed = RecordingSubscriber()
        cancelled = RecordingSubscriber()
        publisher.subscribe(SaleCompleted, completed)
        publisher.subscribe(SaleCancelled, cancelled)
        event = SaleCompleted(uuid4())

        publisher.publish([event])

        assert completed.received == [event]
        assert cancelled.received == []

    def test_base_class_subscription_sees_everything(self):
        publisher = EventPublisher()
        everything = RecordingSubscriber()
        publisher.subscribe(DomainEvent, everything)
        events = [SaleCompleted(uuid4()), SaleCancelled(uuid4())]

        publisher.publish(events)

        assert everything.received == events

    def test_failing_subscriber_does_not_stop_delivery(self):
        publisher = EventPublisher()
        after = RecordingSubscriber()
        publisher.subscribe(SaleCompleted, FailingSubscriber())
        publisher.subscribe(SaleCompleted, after)
        events = [SaleCompleted(uuid4()), SaleCompleted(uuid4())]

        publisher.publish(events)

        assert after.received == events
