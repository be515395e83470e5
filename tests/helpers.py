"""Shared fixtures for the tool tests."""

import io
import os
import shutil
import tempfile
import unittest


class TempDirTestCase(unittest.TestCase):
    """Test case with a scratch directory and a captured stderr reporter."""
    
    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self.errors = []
    
    def tearDown(self):
        shutil.rmtree(self.temp_dir, ignore_errors=True)
    
    def write_file(self, name: str, content: bytes) -> str:
        path = os.path.join(self.temp_dir, name)
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, 'wb') as f:
            f.write(content)
        return path
    
    def missing(self, name: str = "missing.txt") -> str:
        return os.path.join(self.temp_dir, name)
    
    def run_tool(self, runner, designators, stdin: bytes = b""):
        out = io.BytesIO()
        report = runner.run(designators, out, stdin=io.BytesIO(stdin))
        return out.getvalue(), report
