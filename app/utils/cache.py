import logging
import redis
from app.config.config import Config

logger = logging.getLogger(__name__)

_redis_client = None

def get_redis_client() -> redis.Redis:
    """프로세스 단위로 재사용되는 Redis 클라이언트를 반환합니다."""
    global _redis_client
    if _redis_client is None:
        _redis_client = redis.from_url(Config.REDIS_URL, decode_responses=True)
    return _redis_client

def get_cache_client():
    yield get_redis_client()

def invalidate_cache(client, key: str = Config.WEBSTORY_CACHE_KEY) -> bool:
    """캐시 키를 삭제합니다. 실패해도 이미 커밋된 쓰기는 되돌리지 않습니다."""
    try:
        client.delete(key)
        logger.info(f"Cache key '{key}' invalidated.")
        return True
    except redis.RedisError as e:
        logger.error(f"Error invalidating cache key '{key}': {e}")
        return False
