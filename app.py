"""Точка входа Flask-приложения для хранения контактов в файлах .vcf.

Запуск под WSGI-сервером через фабрику: gunicorn 'app:create_app()'
или flask --app app run. Модульного экземпляра app нет: импорт модуля
не трогает файловую систему.
"""
import logging
from typing import Optional

from flask import Flask

from contactbook.config import Settings, ensure_environment, load_settings
from contactbook.repository import ContactStore
from contactbook.routes import STORE_EXTENSION_KEY, contacts_bp

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> Flask:
    """Создаёт и настраивает экземпляр Flask, регистрирует блюпринты."""
    if settings is None:
        # Инициализируем конфигурационный файл при первом запуске
        ensure_environment()
        settings = load_settings()

    app = Flask(__name__)
    store = ContactStore(settings.data_dir)
    store.ensure_root()
    app.extensions[STORE_EXTENSION_KEY] = store

    app.register_blueprint(contacts_bp)
    return app


if __name__ == '__main__':
    ensure_environment()
    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
    application = create_app(settings)
    logger.info('Server running at http://%s:%s', settings.host, settings.port)
    application.run(host=settings.host, port=settings.port, threaded=True)
