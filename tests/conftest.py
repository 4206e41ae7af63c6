import pytest
from kafka.errors import NoBrokersAvailable, TopicAlreadyExistsError, UnknownTopicOrPartitionError

from kafka_admin import kafka_utils


class FakeCluster:
    def __init__(self):
        self.topics = {}
        self.configs = {}
        self.clients = []
        self.create_calls = []
        self.delete_calls = []
        self.leader = 1
        self.errors = {}


class FakeAdminClient:
    """In-memory stand-in for kafka.admin.KafkaAdminClient."""

    def __init__(self, cluster, **config):
        self.cluster = cluster
        self.config = config
        self.closed = False
        cluster.clients.append(self)

    def _maybe_fail(self, method):
        if method in self.cluster.errors:
            raise self.cluster.errors[method]

    def list_topics(self):
        self._maybe_fail("list_topics")
        return list(self.cluster.topics)

    def create_topics(self, new_topics, timeout_ms=None, validate_only=False):
        self._maybe_fail("create_topics")
        self.cluster.create_calls.append(([t.name for t in new_topics], timeout_ms))
        for topic in new_topics:
            if topic.name in self.cluster.topics:
                raise TopicAlreadyExistsError(topic.name)
        for topic in new_topics:
            self.cluster.topics[topic.name] = topic.num_partitions
            self.cluster.configs[topic.name] = dict(topic.topic_configs or {})

    def describe_topics(self, topics=None):
        self._maybe_fail("describe_topics")
        names = list(self.cluster.topics) if topics is None else topics
        result = []
        for name in names:
            count = self.cluster.topics.get(name, 0)
            result.append({
                "error_code": 0 if name in self.cluster.topics else 3,
                "topic": name,
                "is_internal": False,
                "partitions": [
                    {"error_code": 0, "partition": i, "leader": self.cluster.leader, "replicas": [1], "isr": [1]}
                    for i in reversed(range(count))
                ],
            })
        return result

    def delete_topics(self, topics, timeout_ms=None):
        self._maybe_fail("delete_topics")
        self.cluster.delete_calls.append((list(topics), timeout_ms))
        for name in topics:
            if name not in self.cluster.topics:
                raise UnknownTopicOrPartitionError(name)
        for name in topics:
            del self.cluster.topics[name]

    def close(self):
        self.closed = True


@pytest.fixture
def cluster(monkeypatch):
    cluster = FakeCluster()
    monkeypatch.setattr(kafka_utils, "KafkaAdminClient", lambda **config: FakeAdminClient(cluster, **config))
    return cluster


@pytest.fixture
def unreachable(monkeypatch):
    attempts = []

    def refuse(**config):
        attempts.append(config)
        raise NoBrokersAvailable()

    monkeypatch.setattr(kafka_utils, "KafkaAdminClient", refuse)
    return attempts


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    names = ["ENV", "PROJECT_ROOT", "KAFKA_BOOTSTRAP_SERVER", "KAFKA_CLIENT_ID", "KAFKA_ADMIN_TIMEOUT_MS", "LOG_LEVEL"]
    for name in names:
        # setenv first so teardown removes whatever load_dotenv writes
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.setenv("PROJECT_ROOT", str(tmp_path))
    return tmp_path
