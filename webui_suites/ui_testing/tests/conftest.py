"""
================================================================================
UI Testing Pytest Configuration
================================================================================

Fixtures for the browser session lifecycle and page objects.

Key Features:
- One immutable configuration per test process
- One browser session per test, bound to the calling worker
- Teardown that always releases the session, even when the test fails
- Screenshot and URL attached to Allure on failure

================================================================================
"""

import os
from typing import Generator

import pytest
from loguru import logger

from webui_suites.ui_testing.framework.browser_factory import BrowserSession, SessionFactory
from webui_suites.ui_testing.framework.config_loader import (
    Configuration,
    get_configuration,
    init_configuration,
)
from webui_suites.ui_testing.framework.exceptions import ConfigError, DoubleBindError
from webui_suites.ui_testing.framework.page_actions import PageActions
from webui_suites.ui_testing.framework.session_registry import (
    SessionRegistry,
    current_worker_id,
)
from webui_suites.ui_testing.framework.wait_engine import WaitEngine
from webui_suites.ui_testing.pages.login_page import LoginPage
from webui_tools.common import init_logger
from webui_tools.report_tools.allure_utils import (
    attach_png,
    attach_text,
    write_environment_properties,
)


# ================================================================================
# Suite Fixtures
# ================================================================================

@pytest.fixture(scope="session")
def configuration(request) -> Configuration:
    """
    Session-scoped configuration snapshot.

    Loaded once from config/ with the --env / --browser / --headed overrides.
    A configuration error aborts the whole run.
    """
    overrides = {}
    if request.config.getoption("--browser"):
        overrides["browser"] = request.config.getoption("--browser")
    if request.config.getoption("--headed"):
        overrides["headless"] = False

    try:
        config = init_configuration(
            env_override=request.config.getoption("--env"),
            overrides=overrides,
        )
    except ConfigError as e:
        logger.error(f"Configuration error: {e}")
        pytest.exit(f"Configuration error: {e}", returncode=pytest.ExitCode.USAGE_ERROR)

    init_logger(
        level=os.getenv("LOG_LEVEL") or config.get("logLevel"),
        log_file=os.getenv("LOG_FILE") or config.get("logFile"),
        force=True,
    )

    logger.info("== STARTING AUTOMATION SUITE ==")
    logger.info(f"Environment= {config.environment.value}")
    logger.info(f"baseURL= {config.get_string('baseURL')}")
    logger.info(f"browser= {config.get_string('browser')}")

    alluredir = request.config.getoption("--alluredir", default=None)
    if alluredir:
        write_environment_properties(alluredir, config.as_dict())

    return config


@pytest.fixture(scope="session")
def session_registry() -> Generator[SessionRegistry, None, None]:
    """Registry shared by every test in this process."""
    registry = SessionRegistry()
    yield registry
    registry.release_all()


@pytest.fixture(scope="session")
def session_factory() -> SessionFactory:
    return SessionFactory()


@pytest.fixture(scope="session")
def wait_engine(configuration: Configuration) -> WaitEngine:
    return WaitEngine(config_provider=get_configuration)


# ================================================================================
# Browser Session Fixtures
# ================================================================================

@pytest.fixture(scope="function")
def browser_session(
    configuration: Configuration,
    session_factory: SessionFactory,
    session_registry: SessionRegistry,
) -> Generator[BrowserSession, None, None]:
    """
    Function-scoped browser session.

    Launches a browser, binds it to the current worker and opens baseURL.
    Released on every path, including test failure.
    """
    worker_id = current_worker_id()
    logger.info("Initializing browser session...")
    session = session_factory.create(configuration)

    try:
        session_registry.bind(worker_id, session)
    except DoubleBindError:
        try:
            session.close()
        except Exception as e:
            logger.warning(f"Failed to close unbound session: {e}")
        raise

    try:
        session.navigate(configuration.get_string("baseURL"))
        yield session
    finally:
        logger.info("Quitting browser session...")
        session_registry.release(worker_id)


@pytest.fixture
def page_actions(
    browser_session: BrowserSession,
    session_registry: SessionRegistry,
    wait_engine: WaitEngine,
) -> PageActions:
    """Interaction helpers bound to this worker's session."""
    return PageActions(session_registry, wait_engine)


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
def login_page(page_actions: PageActions) -> LoginPage:
    """
    Provides LoginPage instance.

    The session has already opened baseURL, which is the login screen.
    """
    return LoginPage(page_actions)


@pytest.fixture
def credentials(configuration: Configuration) -> dict:
    """Login credentials for the active environment, if configured."""
    username = configuration.get("username")
    password = configuration.get("password")
    if not username or not password:
        pytest.skip(f"No credentials configured for {configuration.environment.value}")
    return {"username": username, "password": password}


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """
    Hook to capture screenshots on test failure.

    Runs before fixture teardown, so the session is still open.
    """
    outcome = yield
    report = outcome.get_result()

    if report.when == "call" and report.failed:
        session = getattr(item, "funcargs", {}).get("browser_session")
        if session is None or session.closed:
            return
        try:
            attach_png(session.screenshot(), name="failure_screenshot")
            attach_text(session.current_url, name="Current URL")
        except Exception as e:
            # Log but don't fail if screenshot capture fails
            logger.warning(f"Failed to capture screenshot on failure: {e}")
