"""Работа с Config.cfg и переменными окружения сервиса."""
import configparser
import logging
import os
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), '..', 'Config.cfg')
DEFAULT_DATA_DIR = os.path.join('.', 'data', 'contacts')
DEFAULT_HOST = '127.0.0.1'
DEFAULT_PORT = 3000


@dataclass(frozen=True)
class Settings:
    """Итоговые настройки: Config.cfg, поверх него переменные окружения."""
    data_dir: str
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = 'INFO'


def get_config_path() -> str:
    return os.environ.get('CONTACTS_CONFIG', DEFAULT_CONFIG_PATH)


def ensure_environment(config_path: Optional[str] = None) -> None:
    """Создаёт Config.cfg со значениями по умолчанию, если его нет."""
    path = config_path or get_config_path()
    if os.path.exists(path):
        return
    config = configparser.ConfigParser()
    config['Storage'] = {'DataDir': DEFAULT_DATA_DIR}
    config['Server'] = {'Host': DEFAULT_HOST, 'Port': str(DEFAULT_PORT)}
    with open(path, 'w', encoding='utf-8') as cfg:
        config.write(cfg)


def load_settings(config_path: Optional[str] = None) -> Settings:
    config = configparser.ConfigParser()
    config.read(config_path or get_config_path(), encoding='utf-8')

    data_dir = config.get('Storage', 'DataDir', fallback=DEFAULT_DATA_DIR)
    host = config.get('Server', 'Host', fallback=DEFAULT_HOST)
    try:
        port = config.getint('Server', 'Port', fallback=DEFAULT_PORT)
    except ValueError:
        logger.warning('Некорректный Port в Config.cfg, используется %s', DEFAULT_PORT)
        port = DEFAULT_PORT

    port_env = os.environ.get('APP_PORT')
    if port_env:
        try:
            port = int(port_env)
        except ValueError:
            logger.warning('Некорректный APP_PORT=%r, используется порт %s', port_env, port)

    return Settings(
        data_dir=os.environ.get('CONTACTS_DIR', data_dir),
        host=os.environ.get('APP_HOST', host),
        port=port,
        log_level=os.environ.get('LOG_LEVEL', 'INFO').upper(),
    )
