"""Prometheus metrics for SkyRide."""

from prometheus_client import Counter

TURNS_PROCESSED = Counter(
    "skyride_turns_processed_total",
    "Total number of user turns processed",
    labelnames=["route"],
)

SLOT_REJECTIONS = Counter(
    "skyride_slot_rejections_total",
    "Answers rejected by a slot validator",
    labelnames=["slot", "reason"],
)

REGISTRATIONS_COMPLETED = Counter(
    "skyride_registrations_completed_total",
    "Registration flows that collected every slot",
)

RECOGNIZER_FAILURES = Counter(
    "skyride_recognizer_failures_total",
    "Number or date-time recognizer failures",
    labelnames=["capability"],
)

INTENT_CLASSIFIER_FAILURES = Counter(
    "skyride_intent_classifier_failures_total",
    "Intent classifier calls that raised",
    labelnames=["classifier"],
)
