import pytest

from oauth_message_classifier.backends.memory import MemoryTokenManager
from oauth_message_classifier.exceptions import TokenNotFoundError
from oauth_message_classifier.types.token import TokenType


class TestMemoryTokenManager:
    @pytest.fixture
    def manager(self):
        return MemoryTokenManager(
            {"rt": TokenType.REQUEST_TOKEN, "at": TokenType.ACCESS_TOKEN},
            namespace="test",
        )

    def test_init(self):
        manager = MemoryTokenManager(namespace="test_ns")
        assert manager.namespace == "test_ns"
        assert manager._tokens == {}

    def test_initial_mapping_is_copied(self):
        tokens = {"rt": TokenType.REQUEST_TOKEN}
        manager = MemoryTokenManager(tokens)
        tokens["at"] = TokenType.ACCESS_TOKEN
        assert "at" not in manager._tokens

    @pytest.mark.asyncio
    async def test_get_token_type(self, manager):
        assert await manager.get_token_type("rt") is TokenType.REQUEST_TOKEN
        assert await manager.get_token_type("at") is TokenType.ACCESS_TOKEN

    @pytest.mark.asyncio
    async def test_unknown_token_raises(self, manager):
        with pytest.raises(TokenNotFoundError) as exc_info:
            await manager.get_token_type("missing")
        assert exc_info.value.token == "missing"

    @pytest.mark.asyncio
    async def test_set_token_type_upgrades(self, manager):
        await manager.set_token_type("rt", TokenType.ACCESS_TOKEN)
        assert await manager.get_token_type("rt") is TokenType.ACCESS_TOKEN

    @pytest.mark.asyncio
    async def test_set_token_type_rejects_strings(self, manager):
        with pytest.raises(ValueError, match="TokenType"):
            await manager.set_token_type("x", "access_token")

    @pytest.mark.asyncio
    async def test_forget(self, manager):
        assert await manager.forget("rt") is True
        assert await manager.forget("rt") is False
        with pytest.raises(TokenNotFoundError):
            await manager.get_token_type("rt")

    @pytest.mark.asyncio
    async def test_health_check(self, manager):
        result = await manager.health_check()
        assert result.healthy is True
        assert result.backend_type == "memory"
        assert result.namespace == "test"
        assert result.metadata == {"request_token": 1, "access_token": 1}

    @pytest.mark.asyncio
    async def test_context_manager_cleans_up(self, manager):
        async with manager as entered:
            assert entered is manager
        assert manager._tokens == {}
