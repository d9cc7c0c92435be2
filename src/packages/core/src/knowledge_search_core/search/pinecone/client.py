"""Pinecone client factory."""
import structlog
from pinecone import Pinecone

logger = structlog.get_logger()


def get_index(api_key: str, index_name: str, index_host: str):
    """Create a Pinecone client and resolve the target index."""
    pc = Pinecone(api_key=api_key)
    logger.info("resolving_index", index=index_name, host=index_host)
    return pc.Index(name=index_name, host=index_host)
