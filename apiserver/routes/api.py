"""
REST API endpoints for Task management.

This module exposes the task resource over HTTP. Handlers only parse
the request, call the task service and pick the response status; all
storage and existence checks live in the service.

Endpoints:
    GET    /health        - Health check
    GET    /tasks         - List all tasks
    GET    /tasks/<id>    - Get a single task by ID
    POST   /tasks         - Create a new task
    PUT    /tasks/<id>    - Replace an existing task
    DELETE /tasks/<id>    - Delete a task
    PATCH  /tasks/<id>    - Mark a task as done
"""

import logging
import os
from flask import Blueprint, jsonify, request, Response

from apiserver.exceptions import TaskNotFoundError
from apiserver.service import get_task_service

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


# -----------------------------------------------------------------------------
# Helper Functions
# -----------------------------------------------------------------------------

def validate_task_data(data: dict, required_fields: list[str] | None = None) -> tuple[bool, str | None]:
    """
    Validate task data from request.

    Args:
        data: Dictionary containing task data.
        required_fields: List of fields that must be present.

    Returns:
        Tuple of (is_valid, error_message).
    """
    if required_fields:
        for field in required_fields:
            if field not in data or data[field] is None:
                return False, f"'{field}' is required"

    if "content" in data and not isinstance(data["content"], str):
        return False, "'content' must be a string"

    # bool only: JSON numbers and strings are not accepted as flags
    if "done" in data and not isinstance(data["done"], bool):
        return False, "'done' must be a boolean"

    return True, None


def read_task_payload() -> tuple[dict | None, str | None]:
    """
    Read and validate a task payload from the request body.

    Returns:
        Tuple of (payload, error_message); payload is None when invalid.
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return None, "Request body must be JSON"

    is_valid, error = validate_task_data(data, required_fields=["content"])
    if not is_valid:
        return None, error

    return data, None


# -----------------------------------------------------------------------------
# API Endpoints
# -----------------------------------------------------------------------------

@api_bp.route("/health", methods=["GET"])
def health_check() -> tuple[Response, int]:
    """Health check endpoint for deployment verification."""
    return jsonify({
        "status": "healthy",
        "environment": os.getenv("ENVIRONMENT", "unknown"),
        "version": os.getenv("APP_VERSION", "unknown")
    }), 200


@api_bp.route("/tasks", methods=["GET"])
def list_tasks() -> tuple[Response, int]:
    """
    List all tasks.

    Returns:
        JSON array of tasks ordered by ID and 200 status code.
    """
    logger.info("GET /tasks - Fetching all tasks")

    tasks = get_task_service().list_tasks()
    logger.info(f"Found {len(tasks)} tasks")

    return jsonify([task.to_dict() for task in tasks]), 200


@api_bp.route("/tasks/<int:task_id>", methods=["GET"])
def get_task(task_id: int) -> tuple[Response, int]:
    """
    Get a single task by ID.

    Args:
        task_id: The unique identifier of the task.

    Returns:
        JSON response with task data and 200 status code.
        Unknown IDs end in the TaskNotFoundError handler (404).
    """
    logger.info(f"GET /tasks/{task_id} - Fetching task")

    task = get_task_service().get_task(task_id)
    return jsonify(task.to_dict()), 200


@api_bp.route("/tasks", methods=["POST"])
def create_task() -> tuple[Response, int]:
    """
    Create a new task.

    Request Body (JSON):
        content: Task text (required)
        id, done: Ignored; the service assigns the ID and starts undone

    Returns:
        JSON response with created task and 201 status code,
        or error message and 400 if validation fails.
    """
    logger.info("POST /tasks - Creating new task")

    data, error = read_task_payload()
    if data is None:
        logger.warning(f"Validation failed: {error}")
        return jsonify({"error": error}), 400

    task = get_task_service().create_task(data["content"])
    return jsonify(task.to_dict()), 201


@api_bp.route("/tasks/<int:task_id>", methods=["PUT"])
def update_task(task_id: int) -> tuple[Response, int]:
    """
    Replace content and done flag of an existing task.

    Args:
        task_id: The unique identifier of the task.

    Request Body (JSON):
        content: Task text (required)
        done: Completion flag (optional, false when omitted)

    Returns:
        JSON response with updated task and 200 status code,
        or error message and 404/400 if not found or validation fails.
    """
    logger.info(f"PUT /tasks/{task_id} - Updating task")

    data, error = read_task_payload()
    if data is None:
        logger.warning(f"Validation failed: {error}")
        return jsonify({"error": error}), 400

    task = get_task_service().update_task(task_id, data["content"], data.get("done", False))
    return jsonify(task.to_dict()), 200


@api_bp.route("/tasks/<int:task_id>", methods=["DELETE"])
def delete_task(task_id: int) -> tuple[str, int]:
    """
    Delete a task.

    Args:
        task_id: The unique identifier of the task.

    Returns:
        Empty body and 204 status code.
    """
    logger.info(f"DELETE /tasks/{task_id} - Deleting task")

    get_task_service().delete_task(task_id)
    return "", 204


@api_bp.route("/tasks/<int:task_id>", methods=["PATCH"])
def mark_done(task_id: int) -> tuple[str, int]:
    """
    Mark a task as done.

    No request body is read; the only transition offered here is
    undone to done.

    Args:
        task_id: The unique identifier of the task.

    Returns:
        Empty body and 200 status code.
    """
    logger.info(f"PATCH /tasks/{task_id} - Marking task as done")

    get_task_service().done(task_id)
    return "", 200


# -----------------------------------------------------------------------------
# Error Handlers
# -----------------------------------------------------------------------------

@api_bp.errorhandler(TaskNotFoundError)
def task_not_found(error: TaskNotFoundError) -> tuple[Response, int]:
    """Translate a missing task into a 404 response."""
    logger.warning(f"Task {error.task_id} not found")
    return jsonify({"error": "Task not found"}), 404


@api_bp.errorhandler(400)
def bad_request(error: Exception) -> tuple[Response, int]:
    """Handle 400 Bad Request errors."""
    return jsonify({"error": "Bad request"}), 400


# Routing errors never reach a blueprint view, so these are app-wide
@api_bp.app_errorhandler(404)
def not_found(error: Exception) -> tuple[Response, int]:
    """Handle 404 Not Found errors."""
    return jsonify({"error": "Resource not found"}), 404


@api_bp.app_errorhandler(405)
def method_not_allowed(error: Exception) -> tuple[Response, int]:
    """Handle 405 Method Not Allowed errors."""
    return jsonify({"error": "Method not allowed"}), 405


@api_bp.errorhandler(500)
def internal_error(error: Exception) -> tuple[Response, int]:
    """Handle 500 Internal Server errors."""
    logger.error(f"Internal server error: {error}")
    return jsonify({"error": "Internal server error"}), 500
