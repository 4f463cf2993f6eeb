"""Tests for Docker service."""

from unittest.mock import Mock, patch

import docker.errors
import pytest

from lambda_builder.services.docker_service import DockerService
from lambda_builder.services.exceptions import (
    ContainerNotFoundError,
    DockerServiceError,
)


class TestDockerService:
    """Test cases for DockerService."""

    @patch('docker.from_env')
    def test_init_success(self, mock_from_env):
        """Test successful initialization."""
        mock_client = Mock()
        mock_client.ping.return_value = None
        mock_from_env.return_value = mock_client

        service = DockerService()
        assert service.client == mock_client
        mock_client.ping.assert_called_once()

    @patch('docker.from_env')
    def test_init_docker_not_running(self, mock_from_env):
        """Test initialization when Docker is not running."""
        mock_from_env.side_effect = docker.errors.DockerException("connection refused")

        with pytest.raises(DockerServiceError, match="Docker daemon is not running"):
            DockerService()

    @patch('docker.from_env')
    def test_init_other_error(self, mock_from_env):
        """Test initialization with other Docker errors."""
        mock_from_env.side_effect = docker.errors.DockerException("Other error")

        with pytest.raises(DockerServiceError, match="Failed to connect to Docker"):
            DockerService()

    @patch('docker.from_env')
    def test_list_containers_with_labels(self, mock_from_env):
        """Test listing containers by label."""
        mock_client = Mock()
        mock_from_env.return_value = mock_client
        mock_containers = [Mock(), Mock()]
        mock_client.containers.list.return_value = mock_containers

        service = DockerService()
        result = service.list_containers(labels={"com.dokku.lambda-builder/executor": "true"})

        assert result == mock_containers
        mock_client.containers.list.assert_called_once_with(
            all=True,
            filters={"label": ["com.dokku.lambda-builder/executor=true"]},
        )

    @patch('docker.from_env')
    def test_list_containers_api_error(self, mock_from_env):
        """Test listing containers when the API fails."""
        mock_client = Mock()
        mock_from_env.return_value = mock_client
        mock_client.containers.list.side_effect = docker.errors.APIError("boom")

        service = DockerService()
        with pytest.raises(DockerServiceError, match="Failed to list containers"):
            service.list_containers()

    @patch('docker.from_env')
    def test_stop_container_not_found(self, mock_from_env):
        """Test stopping a container that has gone away."""
        mock_from_env.return_value = Mock()
        mock_container = Mock()
        mock_container.name = "lambda-builder-executor-abc"
        mock_container.stop.side_effect = docker.errors.NotFound("gone")

        service = DockerService()
        with pytest.raises(ContainerNotFoundError):
            service.stop_container(mock_container)

    @patch('docker.from_env')
    def test_remove_container_success(self, mock_from_env):
        """Test successful container removal."""
        mock_from_env.return_value = Mock()
        mock_container = Mock()

        service = DockerService()
        service.remove_container(mock_container, force=True)

        mock_container.remove.assert_called_once_with(force=True)

    @patch('docker.from_env')
    def test_remove_container_not_found(self, mock_from_env):
        """Test removing non-existent container."""
        mock_from_env.return_value = Mock()
        mock_container = Mock()
        mock_container.remove.side_effect = docker.errors.NotFound("Container not found")

        service = DockerService()
        with pytest.raises(ContainerNotFoundError):
            service.remove_container(mock_container)

    @patch('docker.from_env')
    def test_remove_container_api_error(self, mock_from_env):
        """Test container removal API failure."""
        mock_from_env.return_value = Mock()
        mock_container = Mock()
        mock_container.remove.side_effect = docker.errors.APIError("conflict")

        service = DockerService()
        with pytest.raises(DockerServiceError, match="Failed to remove container"):
            service.remove_container(mock_container)
