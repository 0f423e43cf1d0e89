"""Pytest configuration and fixtures."""

import json

import pytest


@pytest.fixture
def sample_package_json():
    """Sample package.json content for testing."""
    return """
{
  "name": "machinepack-foo",
  "description": "Foo machines",
  "version": "0.2.1",
  "keywords": ["machine", "foo"],
  "license": "MIT",
  "author": "Substack <substack@substack.com>",
  "repository": {
    "type": "git",
    "url": "git://github.com/baz/machinepack-foo.git"
  },
  "dependencies": {
    "lodash": "^2.4.1",
    "async": "~0.9.0"
  },
  "contributors": [
    {"name": "Bob", "email": "bob@example.com"}
  ]
}
"""


@pytest.fixture
def registry_document():
    """Registry document with two published versions."""
    return {
        "_id": "machinepack-foo",
        "name": "machinepack-foo",
        "description": "Foo machines",
        "dist-tags": {"latest": "0.2.0"},
        "time": {"modified": "2015-01-19T22:26:54.588Z", "created": "2014-12-01T10:00:00.000Z"},
        "license": "MIT",
        "versions": {
            "0.1.0": {
                "name": "machinepack-foo",
                "version": "0.1.0",
                "dependencies": {"underscore": "^1.0.0"},
                "repository": "git@github.com:old/machinepack-foo.git",
                "author": {"name": "Old Author"},
            },
            "0.2.0": {
                "name": "machinepack-foo",
                "version": "0.2.0",
                "dependencies": {"lodash": "^2.4.1"},
                "repository": {"type": "git", "url": "git@github.com:baz/machinepack-foo.git"},
                "author": {"name": "Ann", "email": "ann@example.com"},
                "maintainers": [
                    {"name": "Ann", "email": "ann@npm.example.com"},
                    {"name": "Bob", "email": "bob@example.com"},
                ],
            },
        },
    }


@pytest.fixture
def registry_json(registry_document):
    """Registry document as JSON text."""
    return json.dumps(registry_document)


@pytest.fixture
def temp_package_file(tmp_path, sample_package_json):
    """Create a temporary package.json file for testing."""
    manifest = tmp_path / "package.json"
    manifest.write_text(sample_package_json)
    return manifest
