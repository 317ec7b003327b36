"""Overview Navigator

Behavioural add-on for a desktop overview / workspace-switcher UI.

This package provides:
- Dock icon click and scroll handling that resolves an application's
  most recently used window and workspace from activation history
- Animated highlighting of an application's window previews across all
  monitor views
- Workspace reordering from the workspace switcher (Shift + scroll/keys)
- A Sway/i3 host adapter for activation history and workspace commands

Author: NixOS Configuration
License: MIT
Version: 1.0.0
"""

__version__ = "1.0.0"
