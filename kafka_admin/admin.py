import logging

from kafka.errors import KafkaError

from kafka_admin.env_loader import get_timeout_ms
from kafka_admin.kafka_utils import admin_session, metadata_topic_name, partition_id, sorted_partitions, wait_for_leaders
from kafka_admin.topics import TOPICS, topic_names

logger = logging.getLogger(__name__)


def create_topics(broker=None, topics=None, timeout_ms=None):
    """Create every configured topic that the cluster does not have yet.

    Existing topics are filtered out before the create call, so running this
    twice is harmless. Returns False if any Kafka error was logged.
    """
    topics = TOPICS if topics is None else topics
    if timeout_ms is None:
        timeout_ms = get_timeout_ms()
    try:
        logger.info("Connecting to Kafka...")
        with admin_session(broker) as admin:
            logger.info("Connected successfully!")
            existing = set(admin.list_topics())
            logger.info(f"Existing topics: {sorted(existing)}")

            to_create = [t for t in topics if t.name not in existing]
            if not to_create:
                logger.info("All topics already exist.")
                return True

            logger.info(f"Creating {len(to_create)} topics...")
            admin.create_topics(new_topics=to_create, timeout_ms=timeout_ms)
            wait_for_leaders(admin, topic_names(to_create), timeout_ms)
            logger.info("Topics created successfully!")

            print("\nCreated Topics:")
            for metadata in admin.describe_topics(topic_names(topics)):
                print(f"- {metadata_topic_name(metadata)} (Partitions: {len(metadata['partitions'])})")
        return True
    except KafkaError as e:
        logger.error(f"Error creating topics: {e!r}")
        return False
    finally:
        logger.info("Disconnected from Kafka.")


def list_topics(broker=None):
    """Print all topic names, then partition and leader details per topic."""
    try:
        with admin_session(broker) as admin:
            names = admin.list_topics()
            print("\nAll Topics:")
            for index, name in enumerate(names, start=1):
                print(f"{index}. {name}")

            print("\nTopic Details:")
            for metadata in admin.describe_topics():
                partitions = sorted_partitions(metadata)
                print(f"\nTopic: {metadata_topic_name(metadata)}")
                print(f"  Partitions: {len(partitions)}")
                for partition in partitions:
                    print(f"    Partition {partition_id(partition)}: Leader: {partition['leader']}")
        return True
    except KafkaError as e:
        logger.error(f"Error listing topics: {e!r}")
        return False


def delete_topic(topic_name, broker=None, timeout_ms=None):
    if timeout_ms is None:
        timeout_ms = get_timeout_ms()
    try:
        with admin_session(broker) as admin:
            logger.info(f"Deleting topic: {topic_name}")
            admin.delete_topics([topic_name], timeout_ms=timeout_ms)
            logger.info(f'Topic "{topic_name}" deleted successfully.')
        return True
    except KafkaError as e:
        logger.error(f"Error deleting topic {topic_name}: {e!r}")
        return False
