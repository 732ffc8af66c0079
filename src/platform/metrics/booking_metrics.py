from prometheus_client import Counter, Gauge, Histogram


class BookingMetrics:
    """
    Slot Booking Core Metrics Collector

    Tracks reservation/cancellation outcomes, unit-of-work latency and
    real-time fan-out.
    """

    def __init__(self) -> None:
        # ========== Reservation Business Metrics ==========
        self.reservation_requests = Counter(
            'slot_reservation_requests_total',
            'Total slot reservation requests',
            ['result'],  # result: success/slot_unavailable/store_unavailable/invalid
        )

        self.reservation_duration = Histogram(
            'slot_reservation_duration_seconds',
            'Slot reservation processing time',
            ['result'],
            buckets=[0.005, 0.01, 0.05, 0.1, 0.2, 0.5, 1.0, 2.0, 5.0, 10.0],
        )

        self.cancellation_requests = Counter(
            'booking_cancellation_requests_total',
            'Total booking cancellation requests',
            ['result'],  # result: success/not_found/already_cancelled/store_unavailable
        )

        # ========== Real-time Event Metrics ==========
        self.events_published = Counter(
            'booking_events_published_total',
            'Booking events handed to the broadcaster',
            ['event_type'],
        )

        self.sse_connections = Gauge(
            'sse_connections_active',
            'Currently connected SSE clients',
        )

    # ========== Helper Methods ==========

    def record_reservation(self, *, result: str, duration: float) -> None:
        self.reservation_requests.labels(result=result).inc()
        self.reservation_duration.labels(result=result).observe(duration)

    def record_cancellation(self, *, result: str) -> None:
        self.cancellation_requests.labels(result=result).inc()

    def record_event_published(self, *, event_type: str) -> None:
        self.events_published.labels(event_type=event_type).inc()


# Global metrics instance
metrics = BookingMetrics()
