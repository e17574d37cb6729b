"""
Shared test fixtures
"""

import pytest

from services.config_manager import CONFIG_DIR_ENV, ConfigManager

UTILS_DIFF = """diff --git a/src/utils.js b/src/utils.js
--- a/src/utils.js
+++ b/src/utils.js
@@ -1,2 +1,6 @@
 // Utility functions
+export function multiply(a, b) {
+  return a * b;
+}"""

WORKING_TREE_DIFF = """# Staged Changes
diff --git a/src/utils.js b/src/utils.js
index 1234567..89abcde 100644
--- a/src/utils.js
+++ b/src/utils.js
@@ -1,2 +1,6 @@
 // Utility functions
+export function multiply(a, b) {
+  return a * b;
+}
 export const VERSION = '1.0';
@@ -20,3 +24,3 @@ export function add(a, b) {
   const total = a + b;
-  return total;
+  return Number(total);
 }
# Unstaged Changes
diff --git a/README.md b/README.md
deleted file mode 100644
index 3b18e51..0000000
--- a/README.md
+++ /dev/null
@@ -1,3 +0,0 @@
-# Project
-
-Some description.
\\ No newline at end of file
diff --git a/assets/logo.png b/assets/logo.png
new file mode 100644
index 0000000..4f5a2b1
Binary files /dev/null and b/assets/logo.png differ
# Untracked Files
? src/math.js
? notes.txt
"""


@pytest.fixture
def utils_diff() -> str:
    return UTILS_DIFF


@pytest.fixture
def working_tree_diff() -> str:
    return WORKING_TREE_DIFF


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    """Point ConfigManager at a throwaway directory"""
    directory = tmp_path / "config"
    monkeypatch.setenv(CONFIG_DIR_ENV, str(directory))
    ConfigManager.reset_instance()
    yield directory
    ConfigManager.reset_instance()
