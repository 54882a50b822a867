"""
Clan Site - Services

Services are built once per application by ``init_services`` and reached
from request code through ``get_services()``.
"""
from dataclasses import dataclass
from flask import current_app
from .storage_service import FileStore
from .email_service import EmailService
from .quiz_service import QuizGate, score_answers
from .submission_service import SubmissionService
from .admin_service import AdminService
from .result_service import ResultService

EXTENSION_KEY = 'clansite'


@dataclass
class SiteServices:
    file_store: FileStore
    email: EmailService
    quiz_gate: QuizGate
    submissions: SubmissionService
    admin: AdminService
    results: ResultService


def init_services(app):
    """Construct the services for an app and attach them to it."""
    file_store = FileStore(app.config['UPLOAD_FOLDER'])
    file_store.ensure_dir()
    email = EmailService.from_config(app.config)
    quiz_gate = QuizGate(app.config.get('QUIZ_FLAG_SCOPE', QuizGate.SCOPE_GLOBAL))

    services = SiteServices(
        file_store=file_store,
        email=email,
        quiz_gate=quiz_gate,
        submissions=SubmissionService(quiz_gate),
        admin=AdminService(quiz_gate, email),
        results=ResultService(file_store),
    )
    app.extensions[EXTENSION_KEY] = services
    return services


def get_services():
    return current_app.extensions[EXTENSION_KEY]


__all__ = [
    'FileStore',
    'EmailService',
    'QuizGate',
    'score_answers',
    'SubmissionService',
    'AdminService',
    'ResultService',
    'SiteServices',
    'init_services',
    'get_services',
]
