import argparse
import logging
import sys

from kafka_admin.admin import create_topics, delete_topic, list_topics
from kafka_admin.env_loader import get_bootstrap_server, get_log_level, get_timeout_ms, load_environment

logger = logging.getLogger("kafka-admin")

USAGE = """
Kafka Admin Tool
Usage:
  kafka-admin create              - Create all predefined topics
  kafka-admin list                - List all topics
  kafka-admin delete <topicName>  - Delete a specific topic

Options:
  --broker HOST:PORT   Kafka bootstrap server (env KAFKA_BOOTSTRAP_SERVER)
  --timeout-ms MS      Admin request timeout (env KAFKA_ADMIN_TIMEOUT_MS)

Example:
  kafka-admin create
  kafka-admin list
  kafka-admin delete user-registrations
"""


def setup_logging(level=None):
    logging.basicConfig(
        level=level or get_log_level(),
        format="%(asctime)s %(levelname)s %(message)s",
    )
    # kafka-python logs every connection step at INFO
    logging.getLogger("kafka").setLevel(logging.WARNING)


def build_parser():
    parser = argparse.ArgumentParser(prog="kafka-admin", description="Kafka Admin Tool")
    parser.add_argument("command", nargs="?", help="create, list or delete")
    parser.add_argument("topic_name", nargs="?", help="Topic to delete")
    parser.add_argument("--broker", type=str, default=get_bootstrap_server(), help="Kafka bootstrap server")
    parser.add_argument("--timeout-ms", type=int, default=get_timeout_ms(), help="Admin request timeout in ms")
    return parser


def main(argv=None):
    load_environment()
    setup_logging()
    args = build_parser().parse_args(argv)

    if args.command == "create":
        ok = create_topics(broker=args.broker, timeout_ms=args.timeout_ms)
    elif args.command == "list":
        ok = list_topics(broker=args.broker)
    elif args.command == "delete":
        if not args.topic_name:
            logger.error("Please provide a topic name to delete")
            return 1
        ok = delete_topic(args.topic_name, broker=args.broker, timeout_ms=args.timeout_ms)
    else:
        print(USAGE)
        return 0

    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
