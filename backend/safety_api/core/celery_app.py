"""
Celery application configuration for the Safety Screening API.

Handles background work for:
- Moderation audit writes (fire-and-forget from the screening paths)
"""

from celery import Celery

from safety_api.core.config import get_settings

settings = get_settings()

celery_app = Celery(
    "safety_screening",
    broker=settings.redis_url,
    backend=settings.redis_url,
    include=[
        "safety_api.tasks.audit_tasks",
    ],
)

celery_app.conf.update(
    # Task serialization
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    # Timezone
    timezone="UTC",
    enable_utc=True,
    # Task execution
    task_time_limit=60,
    task_soft_time_limit=45,
    task_ignore_result=True,  # Audit writes are fire-and-forget
    task_publish_retry=False,
    # Worker
    worker_prefetch_multiplier=1,
    worker_concurrency=4,
)
