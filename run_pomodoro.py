#!/usr/bin/env python3
import os
import sys

def main():
    # Running from a source checkout: make the 'pomodoro_desk' package importable.
    try:
        import pomodoro_desk.main_qt  # noqa: F401
    except ImportError:
        project_root = os.path.abspath(os.path.dirname(__file__))
        if project_root not in sys.path:
            sys.path.insert(0, project_root)

    from pomodoro_desk.main_qt import main as app_main
    sys.exit(app_main())

if __name__ == '__main__':
    main()
