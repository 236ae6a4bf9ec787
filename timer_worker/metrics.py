from prometheus_client import Counter

DECISION_COUNT = Counter(
    "timer_decisions_total",
    "Total scheduling decisions",
    ["outcome"]
)

RESCHEDULE_COUNT = Counter(
    "timer_reschedules_total",
    "Total automatic timer resets"
)

EFFECT_FAILURE_COUNT = Counter(
    "timer_effect_failures_total",
    "Total collaborator failures while executing decisions",
    ["effect"]
)
