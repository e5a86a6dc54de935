"""Life Interviewer server - main entry point."""

from life_interviewer.__main__ import main

if __name__ == "__main__":
    main()
