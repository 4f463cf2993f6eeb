"""Constants used throughout Lambda Builder."""


# Project files
OVERRIDE_FILE_NAME = "lambda.yml"
ARCHIVE_FILE_NAME = "lambda.zip"
PROCFILE_NAME = "Procfile"
PROCFILE_PROCESS_TYPE = "web"

# Container runtime
CONTAINER_RUNTIME = "docker"
CONTAINER_PREFIX = "lambda-builder"
EXECUTOR_NAME_PREFIX = f"{CONTAINER_PREFIX}-executor"
EXECUTOR_LABEL_KEY = "com.dokku.lambda-builder/executor"
EXECUTOR_LABEL = f"{EXECUTOR_LABEL_KEY}=true"
BUILD_ZIP_ENV = "LAMBDA_BUILD_ZIP=1"
TASK_MOUNT_PATH = "/tmp/task"
SCRIPT_SHELL = ["/bin/bash", "-c"]

# Run image
RUN_IMAGE_TASK_DIR = "/var/task"
API_PORT_ENV = "DOCKER_LAMBDA_API_PORT"
RUNTIME_PORT_ENV = "DOCKER_LAMBDA_RUNTIME_PORT"
PORT_UNSET = -1
IMAGE_TAG_TEMPLATE = CONTAINER_PREFIX + "/{app_name}:latest"

# Temporary file prefix for scratch directories and rendered Dockerfiles
TEMP_PREFIX = "lambda-builder"
