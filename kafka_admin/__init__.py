from kafka_admin.admin import create_topics, delete_topic, list_topics
from kafka_admin.topics import TOPICS

__all__ = ["TOPICS", "create_topics", "delete_topic", "list_topics"]
