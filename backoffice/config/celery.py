"""
Configuração do Celery para processamento assíncrono.

O Celery processa os Domain Events publicados após o commit
(histórico de clientes e log de eventos).

Arquitetura:
- Broker: RabbitMQ (mensagens entre Django e Workers)
- Backend: Redis (resultados de tarefas)

Uso:
    celery -A backoffice.config.celery worker -l INFO -Q default,events
"""

import os
from celery import Celery
from kombu import Exchange, Queue

# Definir módulo de settings do Django
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'backoffice.config.settings')

app = Celery('backoffice')

# Carrega CELERY_* do settings (broker, backend, serialização, retry)
app.config_from_object('django.conf:settings', namespace='CELERY')

app.conf.update(
    # Monitoramento
    worker_send_task_events=True,
    task_send_sent_event=True,
)

# Definir filas
app.conf.task_default_queue = 'default'
app.conf.task_queues = (
    Queue('default', Exchange('default'), routing_key='default'),
    Queue('events', Exchange('events'), routing_key='events.#'),
)

# Roteamento de tarefas para filas
app.conf.task_routes = {
    'backoffice.adapters.django_app.events.handlers.*': {
        'queue': 'events',
        'routing_key': 'events.domain',
    },
}

# Auto-descoberta de tarefas
app.autodiscover_tasks(['backoffice.adapters.django_app.events'], related_name='handlers')
