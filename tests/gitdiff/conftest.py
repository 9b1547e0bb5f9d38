"""Shared fixtures and sample diffs for gitdiff tests."""

import pytest

from gitdiff.gitdiff_parser import GitDiffParser


MODIFIED_DIFF = """diff --git a/app/models/build.rb b/app/models/build.rb
index 1a2b3c4..5d6e7f8 100644
--- a/app/models/build.rb
+++ b/app/models/build.rb
@@ -11,7 +11,7 @@ def valid?
 
   def run
     api.create_pending_status(*api_params, 'Hound is working...')
-    @style_guide.check(pull_request_additions)
+    @style_guide.check(api.pull_request_files(@pull_request))
     build = repo.builds.create!(violations: @style_guide.violations)
     update_api_status(build)
   end
@@ -19,6 +19,7 @@ def run
   private
 
   def update_api_status(build = nil)
+    # might not need this after using Rubocop and fetching individual files.
     sleep 1
     if @style_guide.violations.any?
       api.create_failure_status(*api_params, 'Hound does not approve', build_url(build))
"""


MULTI_FILE_DIFF = """diff --git a/README.md b/README.md
index 0000001..0000002 100644
--- a/README.md
+++ b/README.md
@@ -1,3 +1,4 @@
 # Project
+
 Some text
 More text
diff --git a/docs/new.txt b/docs/new.txt
new file mode 100644
index 0000000..0000003
--- /dev/null
+++ b/docs/new.txt
@@ -0,0 +1,2 @@
+first
+second
diff --git a/old_module.py b/old_module.py
deleted file mode 100644
index 0000004..0000000
--- a/old_module.py
+++ /dev/null
@@ -1,2 +0,0 @@
-import os
-print(os.getcwd())
diff --git a/lib/old_name.py b/lib/new_name.py
similarity index 90%
rename from lib/old_name.py
rename to lib/new_name.py
index 0000005..0000006 100644
--- a/lib/old_name.py
+++ b/lib/new_name.py
@@ -1,3 +1,3 @@
 def f():
-    return 1
+    return 2
 
diff --git a/images/logo.png b/images/logo.png
index 0000007..0000008 100644
Binary files a/images/logo.png and b/images/logo.png differ
"""


@pytest.fixture
def parser():
    """Create a parser for testing."""
    return GitDiffParser()


@pytest.fixture
def modified_patch(parser):
    """The single patch parsed from MODIFIED_DIFF."""
    return parser.parse(MODIFIED_DIFF)[0]


@pytest.fixture
def multi_file_patches(parser):
    """The patches parsed from MULTI_FILE_DIFF."""
    return parser.parse(MULTI_FILE_DIFF)


@pytest.fixture
def modified_diff():
    """A single-file diff with two hunks."""
    return MODIFIED_DIFF


@pytest.fixture
def multi_file_diff():
    """A diff touching five files in different ways."""
    return MULTI_FILE_DIFF
