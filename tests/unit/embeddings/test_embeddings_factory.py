from unittest.mock import patch

import pytest

from documind.embeddings import EmbeddingsConfig, create_embeddings_client
from documind.embeddings.local import LocalEmbeddingsClient


class TestCreateEmbeddingsClient:
    def test_local_client_from_config(self) -> None:
        with patch("documind.embeddings.local.SentenceTransformer") as mock_st:
            client = create_embeddings_client(
                EmbeddingsConfig(model="all-MiniLM-L6-v2", batch_size=8, normalize=False)
            )

            assert isinstance(client, LocalEmbeddingsClient)
            mock_st.assert_called_once_with("all-MiniLM-L6-v2")
            assert client._batch_size == 8
            assert client._normalize is False

    def test_default_model(self) -> None:
        with patch("documind.embeddings.local.SentenceTransformer") as mock_st:
            create_embeddings_client(EmbeddingsConfig())

            mock_st.assert_called_once_with("sentence-transformers/all-MiniLM-L6-v2")

    def test_unknown_provider_raises(self) -> None:
        config = EmbeddingsConfig(provider="cloud")  # type: ignore[arg-type]

        with pytest.raises(ValueError, match="Unknown embeddings provider"):
            create_embeddings_client(config)
