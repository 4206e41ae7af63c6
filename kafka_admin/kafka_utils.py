import logging
import time
from contextlib import contextmanager

from kafka.admin import KafkaAdminClient

from kafka_admin.env_loader import get_bootstrap_server, get_client_id

logger = logging.getLogger(__name__)

LEADER_POLL_INTERVAL = 0.5


@contextmanager
def admin_session(broker=None, client_id=None):
    """Yield a connected KafkaAdminClient and close it on every exit path.

    The client connects in its constructor, so NoBrokersAvailable and
    friends are raised from the ``with`` statement itself.
    """
    admin = KafkaAdminClient(
        bootstrap_servers=broker or get_bootstrap_server(),
        client_id=client_id or get_client_id(),
    )
    try:
        yield admin
    finally:
        admin.close()


def metadata_topic_name(topic_metadata):
    return topic_metadata.get("topic", topic_metadata.get("name"))


def partition_id(partition):
    if "partition" in partition:
        return partition["partition"]
    return partition.get("partition_index")


def sorted_partitions(topic_metadata):
    return sorted(topic_metadata.get("partitions", []), key=partition_id)


def has_leaders(topic_metadata):
    partitions = topic_metadata.get("partitions") or []
    if not partitions:
        return False
    return all(p.get("leader", -1) >= 0 for p in partitions)


def wait_for_leaders(admin, topics, timeout_ms):
    """Poll topic metadata until every partition of ``topics`` has a leader.

    Returns True once all leaders are elected, False if ``timeout_ms``
    elapses first.
    """
    deadline = time.monotonic() + timeout_ms / 1000.0
    pending = set(topics)
    while True:
        for metadata in admin.describe_topics(sorted(pending)):
            if has_leaders(metadata):
                pending.discard(metadata_topic_name(metadata))
        if not pending:
            return True
        if time.monotonic() >= deadline:
            logger.warning(f"Timed out waiting for leaders of: {', '.join(sorted(pending))}")
            return False
        time.sleep(LEADER_POLL_INTERVAL)
