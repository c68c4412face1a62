"""
Basic import tests to verify the core functionality.
"""


def test_learning_service_imports():
    """Test that learning_service exposes the engine and models."""
    from learning_service import (
        RecommendationEngine,
        build_default_engine,
        LearningRecommendation,
        RecommendationType,
        setup_logging,
        stop_logging,
    )

    assert callable(build_default_engine)
    assert callable(setup_logging)
    assert callable(stop_logging)
    assert isinstance(build_default_engine(), RecommendationEngine)
    assert RecommendationType("challenge") is RecommendationType.CHALLENGE
    assert LearningRecommendation.model_fields["suggested_task"].alias == "suggestedTask"


def test_app_subsystem_imports():
    """Test that the web subsystems can be imported."""
    from app.student_data import create_student_data_module
    from app.user_management import create_user_management_module
    from app.recommendations import create_recommendations_module
    from app.main import create_app

    assert callable(create_student_data_module)
    assert callable(create_user_management_module)
    assert callable(create_recommendations_module)
    assert callable(create_app)


def test_logging_setup_and_stop():
    import logging
    from learning_service.logging_config import logging_config, setup_logging, stop_logging

    root_logger = logging.getLogger()
    saved_handlers, saved_level = root_logger.handlers[:], root_logger.level

    setup_logging(debug=True)
    try:
        assert logging_config.is_running
        assert isinstance(root_logger.handlers[0], logging.handlers.QueueHandler)
    finally:
        stop_logging()
        root_logger.handlers[:] = saved_handlers
        root_logger.setLevel(saved_level)
    assert not logging_config.is_running
