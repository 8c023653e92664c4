"""JSON-маршруты Flask для работы с контактами, экспорт и импорт."""
import logging
from datetime import datetime
from io import BytesIO

from flask import Blueprint, Response, current_app, jsonify, request, send_file

from . import errors, vcard
from .excel_io import export_to_excel, import_from_excel
from .models import Contact
from .repository import ContactStore

logger = logging.getLogger(__name__)

contacts_bp = Blueprint('contacts', __name__)
STORE_EXTENSION_KEY = 'contact_store'


def get_store() -> ContactStore:
    return current_app.extensions[STORE_EXTENSION_KEY]


def _json_body():
    payload = request.get_json(silent=True)
    if payload is None:
        raise errors.InvalidContact('Тело запроса должно быть JSON-объектом')
    return payload


def _error(exc: Exception, status: int):
    return jsonify({'error': str(exc)}), status


@contacts_bp.errorhandler(errors.NotFound)
def handle_not_found(exc):
    return _error(exc, 404)


@contacts_bp.errorhandler(errors.IOFailure)
def handle_io_failure(exc):
    logger.error('Ошибка хранилища (%s): %s', exc.operation, exc.__cause__ or exc)
    return _error(exc, 500)


@contacts_bp.errorhandler(ValueError)
def handle_bad_request(exc):
    # IdentifierConflict, InvalidIdentifier, InvalidContact, MissingIdentifier, EmptyInput
    return _error(exc, 400)


@contacts_bp.route('/health')
def health():
    return jsonify({'status': 'ok'})


@contacts_bp.route('/contacts', methods=['GET'])
def list_contacts():
    contacts = get_store().list()
    return jsonify([c.to_dict() for c in contacts])


@contacts_bp.route('/contacts/<contact_id>', methods=['GET'])
def get_contact(contact_id: str):
    return jsonify(get_store().get(contact_id).to_dict())


@contacts_bp.route('/contacts', methods=['POST'])
def create_contact():
    contact = Contact.from_dict(_json_body())
    get_store().create(contact)
    return jsonify(contact.to_dict()), 201


@contacts_bp.route('/contacts/<contact_id>', methods=['PUT'])
def update_contact(contact_id: str):
    contact = Contact.from_dict(_json_body(), default_id=contact_id)
    get_store().update(contact_id, contact)
    return jsonify(contact.to_dict())


@contacts_bp.route('/contacts/<contact_id>', methods=['DELETE'])
def delete_contact(contact_id: str):
    get_store().delete(contact_id)
    return jsonify({'deleted': contact_id})


@contacts_bp.route('/export/contacts.vcf')
def export_vcf():
    data = vcard.encode_many(get_store().list())
    return Response(
        data,
        mimetype='text/vcard',
        headers={'Content-Disposition': 'attachment; filename=contacts.vcf'},
    )


@contacts_bp.route('/export/contacts.xlsx')
def export_excel():
    data = export_to_excel(get_store().list())
    filename = f"contacts_{datetime.now().strftime('%Y%m%d_%H%M%S')}.xlsx"
    return send_file(BytesIO(data), as_attachment=True, download_name=filename, mimetype='application/vnd.openxmlformats-officedocument.spreadsheetml.sheet')


@contacts_bp.route('/import/excel', methods=['POST'])
def import_excel():
    file = request.files.get('excel_file')
    if not file:
        return jsonify({'error': 'Не выбран файл для импорта'}), 400
    imported_count = import_from_excel(BytesIO(file.read()), get_store())
    return jsonify({'imported': imported_count}), 201
