import pytest

from legalcase.services import (
    AuthService,
    CaseService,
    ClientService,
    DocumentService,
    HearingService,
)


@pytest.fixture
def client_service(db_session):
    return ClientService(db_session)


@pytest.fixture
def case_service(db_session):
    return CaseService(db_session)


@pytest.fixture
def hearing_service(db_session):
    return HearingService(db_session)


@pytest.fixture
def document_service(db_session):
    return DocumentService(db_session)


@pytest.fixture
def auth_service(db_session, hasher):
    return AuthService(db_session, hasher=hasher)
