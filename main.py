"""Entry point: send subscribed AFD sections to every user."""

from notifications.process_subscribers import main

if __name__ == "__main__":
    main()
