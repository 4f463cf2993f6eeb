"""Build scripts executed inside the build container.

Each script runs with the application mounted at /tmp/task and must leave
lambda.zip in that directory when LAMBDA_BUILD_ZIP is set.
"""

DOTNET_BUILD_SCRIPT = """set -eo pipefail
cd /tmp/task

echo "-----> Restoring and publishing dotnet project"
dotnet restore
dotnet publish --configuration Release --output /tmp/publish

if [[ "$LAMBDA_BUILD_ZIP" == "1" ]]; then
  echo "-----> Creating lambda.zip"
  rm -f /tmp/task/lambda.zip
  cd /tmp/publish
  zip -q -r /tmp/task/lambda.zip .
fi
"""

GO_BUILD_SCRIPT = """set -eo pipefail
cd /tmp/task

echo "-----> Downloading go modules"
go mod download

echo "-----> Compiling bootstrap binary"
GOOS=linux CGO_ENABLED=0 go build -o bootstrap .

if [[ "$LAMBDA_BUILD_ZIP" == "1" ]]; then
  echo "-----> Creating lambda.zip"
  rm -f lambda.zip
  zip -q -r lambda.zip bootstrap
  rm -f bootstrap
fi
"""

NODEJS_BUILD_SCRIPT = """set -eo pipefail
cd /tmp/task

echo "-----> Installing production dependencies"
if [[ -f package-lock.json ]]; then
  npm ci --production
else
  npm install --production
fi

if [[ "$LAMBDA_BUILD_ZIP" == "1" ]]; then
  echo "-----> Creating lambda.zip"
  rm -f lambda.zip
  zip -q -r lambda.zip . -x '.git/*' -x 'lambda.yml'
fi
"""

PYTHON_BUILD_SCRIPT = """set -eo pipefail
cd /tmp/task
rm -rf /tmp/build
mkdir -p /tmp/build

if [[ -f requirements.txt ]]; then
  echo "-----> Installing dependencies from requirements.txt"
  pip install -q -r requirements.txt -t /tmp/build
elif [[ -f poetry.lock ]]; then
  echo "-----> Installing dependencies from poetry.lock"
  pip install -q poetry
  poetry export --without-hashes -f requirements.txt -o /tmp/requirements.txt
  pip install -q -r /tmp/requirements.txt -t /tmp/build
elif [[ -f Pipfile ]]; then
  echo "-----> Installing dependencies from Pipfile"
  pip install -q pipenv
  pipenv requirements > /tmp/requirements.txt
  pip install -q -r /tmp/requirements.txt -t /tmp/build
elif [[ -f pyproject.toml ]]; then
  echo "-----> Installing project from pyproject.toml"
  pip install -q . -t /tmp/build
fi

if [[ "$LAMBDA_BUILD_ZIP" == "1" ]]; then
  echo "-----> Creating lambda.zip"
  rm -f lambda.zip
  cp -r /tmp/task/. /tmp/build
  rm -f /tmp/build/lambda.zip
  cd /tmp/build
  zip -q -r /tmp/task/lambda.zip . -x '.git/*' -x '__pycache__/*'
fi
"""

RUBY_BUILD_SCRIPT = """set -eo pipefail
cd /tmp/task

echo "-----> Installing gems"
bundle config set --local path vendor/bundle
bundle config set --local without 'development test'
bundle install

if [[ "$LAMBDA_BUILD_ZIP" == "1" ]]; then
  echo "-----> Creating lambda.zip"
  rm -f lambda.zip
  zip -q -r lambda.zip . -x '.git/*' -x 'lambda.yml'
fi
"""
