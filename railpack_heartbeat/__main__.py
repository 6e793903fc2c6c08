"""Run with: python -m railpack_heartbeat"""

from railpack_heartbeat.runner import main

if __name__ == "__main__":
    main()
