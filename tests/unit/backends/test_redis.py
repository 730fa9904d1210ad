from unittest.mock import AsyncMock, patch

import pytest
from redis.exceptions import ConnectionError, ResponseError

from oauth_message_classifier.backends.redis import RedisTokenManager
from oauth_message_classifier.exceptions import (
    BackendConnectionError,
    BackendOperationError,
    TokenNotFoundError,
)
from oauth_message_classifier.types.token import TokenType


class TestRedisTokenManager:
    @pytest.fixture
    def mock_redis(self):
        mock = AsyncMock()
        mock.hgetall.return_value = {}
        mock.ping.return_value = True
        return mock

    @pytest.fixture
    def manager(self, mock_redis):
        return RedisTokenManager(redis_client=mock_redis, namespace="test")

    def test_init(self):
        manager = RedisTokenManager(redis_url="redis://example:6380", namespace="ns")
        assert manager.redis_url == "redis://example:6380"
        assert manager.namespace == "ns"
        assert manager._redis is None
        assert manager._owned_redis is True

    def test_url_from_environment(self, monkeypatch):
        monkeypatch.setenv("REDIS_URL", "redis://env-host:6379")
        assert RedisTokenManager().redis_url == "redis://env-host:6379"

    def test_default_url(self, monkeypatch):
        monkeypatch.delenv("REDIS_URL", raising=False)
        assert RedisTokenManager().redis_url == "redis://localhost:6379"

    def test_token_key(self, manager):
        assert manager._get_token_key("abc") == "test:token:abc"

    @pytest.mark.asyncio
    async def test_get_token_type_access(self, manager, mock_redis):
        mock_redis.hgetall.return_value = {"token_type": "access_token"}

        assert await manager.get_token_type("t1") is TokenType.ACCESS_TOKEN
        mock_redis.hgetall.assert_awaited_once_with("test:token:t1")

    @pytest.mark.asyncio
    async def test_get_token_type_request(self, manager, mock_redis):
        mock_redis.hgetall.return_value = {
            "token_type": "request_token",
            "consumer_key": "ck1",
            "issued_at": "1191242096",
        }

        record = await manager.get_record("t1")

        assert record.token_type is TokenType.REQUEST_TOKEN
        assert record.consumer_key == "ck1"
        assert record.issued_at is not None
        assert record.issued_at.year == 2007

    @pytest.mark.asyncio
    async def test_missing_record_raises_not_found(self, manager):
        with pytest.raises(TokenNotFoundError) as exc_info:
            await manager.get_token_type("missing")
        assert exc_info.value.token == "missing"

    @pytest.mark.asyncio
    async def test_malformed_record(self, manager, mock_redis):
        mock_redis.hgetall.return_value = {"token_type": "refresh_token"}

        with pytest.raises(BackendOperationError, match="Malformed"):
            await manager.get_token_type("t1")

    @pytest.mark.asyncio
    async def test_connection_error(self, manager, mock_redis):
        mock_redis.hgetall.side_effect = ConnectionError("refused")

        with pytest.raises(BackendConnectionError) as exc_info:
            await manager.get_token_type("t1")
        assert isinstance(exc_info.value.__cause__, ConnectionError)

    @pytest.mark.asyncio
    async def test_other_redis_error(self, manager, mock_redis):
        mock_redis.hgetall.side_effect = ResponseError("WRONGTYPE")

        with pytest.raises(BackendOperationError):
            await manager.get_token_type("t1")

    @pytest.mark.asyncio
    async def test_lazy_connection(self, mock_redis):
        manager = RedisTokenManager(redis_url="redis://localhost:6379")
        mock_redis.hgetall.return_value = {"token_type": "access_token"}

        with patch(
            "oauth_message_classifier.backends.redis.Redis.from_url",
            return_value=mock_redis,
        ) as from_url:
            await manager.get_token_type("t1")
            await manager.get_token_type("t1")

        from_url.assert_called_once()
        assert from_url.call_args.kwargs["decode_responses"] is True

    @pytest.mark.asyncio
    async def test_bytes_record_from_undecoded_client(self, manager, mock_redis):
        mock_redis.hgetall.return_value = {
            b"token_type": b"access_token",
            b"consumer_key": b"ck1",
        }

        record = await manager.get_record("t1")

        assert record.token_type is TokenType.ACCESS_TOKEN
        assert record.consumer_key == "ck1"

    @pytest.mark.asyncio
    async def test_undecodable_bytes_record(self, manager, mock_redis):
        mock_redis.hgetall.return_value = {b"token_type": b"\xff\xfe"}

        with pytest.raises(BackendOperationError, match="Malformed"):
            await manager.get_token_type("t1")

    @pytest.mark.asyncio
    async def test_invalid_url_raises_connection_error(self):
        manager = RedisTokenManager(redis_url="redis://localhost:6379")

        with patch(
            "oauth_message_classifier.backends.redis.Redis.from_url",
            side_effect=ValueError("Redis URL must specify one of the schemes"),
        ):
            with pytest.raises(BackendConnectionError, match="Invalid Redis URL"):
                await manager.get_token_type("t1")
            result = await manager.health_check()

        assert result.healthy is False
        assert "Invalid Redis URL" in result.error
        assert manager._redis is None

    @pytest.mark.asyncio
    async def test_health_check(self, manager):
        result = await manager.health_check()
        assert result.healthy is True
        assert result.backend_type == "redis"

    @pytest.mark.asyncio
    async def test_health_check_unhealthy(self, manager, mock_redis):
        mock_redis.ping.side_effect = ConnectionError("down")

        result = await manager.health_check()

        assert result.healthy is False
        assert "down" in result.error

    @pytest.mark.asyncio
    async def test_cleanup_keeps_injected_client(self, manager, mock_redis):
        await manager.cleanup()
        mock_redis.aclose.assert_not_awaited()
        assert manager._redis is mock_redis

    @pytest.mark.asyncio
    async def test_cleanup_closes_owned_client(self, mock_redis):
        manager = RedisTokenManager()
        with patch(
            "oauth_message_classifier.backends.redis.Redis.from_url",
            return_value=mock_redis,
        ):
            async with manager:
                assert manager._redis is mock_redis

        mock_redis.aclose.assert_awaited_once()
        assert manager._redis is None
