"""OpenAI embedding client."""
import structlog
from openai import OpenAI

logger = structlog.get_logger()

DEFAULT_EMBED_MODEL = "text-embedding-3-small"


class OpenAIEmbedder:
    """Turns query text into a vector with the OpenAI embeddings API."""

    def __init__(self, client: OpenAI, model: str = DEFAULT_EMBED_MODEL):
        self.client = client
        self.model = model

    def embed(self, text: str) -> list[float]:
        """Embed a single string and return the first embedding."""
        logger.debug("embedding_query", model=self.model, chars=len(text))
        res = self.client.embeddings.create(model=self.model, input=text)
        return res.data[0].embedding


def get_embedder(api_key: str, model: str = DEFAULT_EMBED_MODEL) -> OpenAIEmbedder:
    """Create an embedder. Failed calls are not retried."""
    logger.info("creating_embedding_client", model=model)
    return OpenAIEmbedder(OpenAI(api_key=api_key, max_retries=0), model)
