"""Shared test fixtures for secret-wrapper-k8s tests."""

import pytest


@pytest.fixture
def sample_secret_yaml():
    """Sample secret YAML content with encoded data values."""
    return b"""apiVersion: v1
kind: Secret
metadata:
  name: test-secret
  namespace: default
type: Opaque
data:
  username: YWRtaW4=
  password: cGFzc3dvcmQxMjM=
"""


@pytest.fixture
def revealed_secret_yaml():
    """The sample secret with its data values decoded."""
    return b"""apiVersion: v1
kind: Secret
metadata:
  name: test-secret
  namespace: default
type: Opaque
data:
  username: admin
  password: password123
"""


@pytest.fixture
def multiline_secret_yaml():
    """Secret YAML whose data value decodes to several lines."""
    return b"""apiVersion: v1
kind: Secret
metadata:
  name: test-secret
type: Opaque
data:
  multiline: bGluZTEKbGluZTIKbGluZTM=
"""


@pytest.fixture
def mixed_secret_yaml():
    """Secret YAML with both data and stringData sections."""
    return b"""apiVersion: v1
kind: Secret
metadata:
  name: test-secret
type: Opaque
data:
  encoded: c2VjcmV0
stringData:
  plain: plaintext
  looks_encoded: c2VjcmV0
"""


@pytest.fixture
def configmap_yaml():
    """ConfigMap YAML with the same shape as a secret."""
    return b"""apiVersion: v1
kind: ConfigMap
metadata:
  name: test-config
data:
  username: YWRtaW4=
"""


@pytest.fixture
def secret_file(tmp_path, sample_secret_yaml):
    """Sample secret written to a temporary file."""
    path = tmp_path / "secret.yaml"
    path.write_bytes(sample_secret_yaml)
    return path


@pytest.fixture
def commented_secret_yaml():
    """Secret YAML carrying head, inline and between-key comments."""
    return b"""# managed by team-x
apiVersion: v1
kind: Secret
metadata:
  name: test-secret  # keep me
# opaque secret
type: Opaque
data:
  username: YWRtaW4=
"""
