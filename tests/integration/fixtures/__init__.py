# tests/integration/fixtures/__init__.py
from .auth_fixtures import Account, Session, SessionError, SessionManager, TEST_ACCOUNT
from .cleanup_fixtures import ResetManager
from .fixture_store import CommentFixture, FixtureStore, FixtureStoreError, PostFixture
from .data_fixtures import FixtureGenerator
from .seed_fixtures import PostSeeder
from .pipeline import PipelineStep, SetupPipeline
from .stub_service import InMemoryBlogService
from .assertions import (
    ContractViolation,
    assert_bad_request,
    assert_business_error,
    assert_no_password,
    assert_not_found,
    assert_status,
    assert_success,
    assert_unauthorized,
    assert_unauthorized_for,
)

__all__ = [
    'Account', 'Session', 'SessionError', 'SessionManager', 'TEST_ACCOUNT',
    'ResetManager', 'CommentFixture', 'FixtureStore', 'FixtureStoreError', 'PostFixture',
    'FixtureGenerator', 'PostSeeder', 'PipelineStep', 'SetupPipeline', 'InMemoryBlogService',
    'ContractViolation', 'assert_bad_request', 'assert_business_error', 'assert_no_password',
    'assert_not_found', 'assert_status', 'assert_success', 'assert_unauthorized',
    'assert_unauthorized_for',
]
