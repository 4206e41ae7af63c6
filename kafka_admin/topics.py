from kafka.admin import NewTopic

# Topics managed by the `create` command. Config values are strings, as the
# broker expects them.
TOPICS = [
    NewTopic(
        name="user-registrations",
        num_partitions=3,
        replication_factor=1,
        topic_configs={
            "retention.ms": "604800000",  # 7 days
            "cleanup.policy": "delete",
        },
    ),
    NewTopic(
        name="order-events",
        num_partitions=5,
        replication_factor=1,
        topic_configs={
            "retention.ms": "2592000000",  # 30 days
            "cleanup.policy": "compact,delete",
        },
    ),
    NewTopic(
        name="payment-transactions",
        num_partitions=2,
        replication_factor=1,
        topic_configs={
            "retention.ms": "86400000",  # 1 day
        },
    ),
    NewTopic(
        name="inventory-updates",
        num_partitions=3,
        replication_factor=1,
        topic_configs={
            "retention.bytes": "1073741824",  # 1 GB
        },
    ),
    NewTopic(
        name="notification-events",
        num_partitions=2,
        replication_factor=1,
    ),
]


def topic_names(topics=None):
    return [t.name for t in (TOPICS if topics is None else topics)]
