"""Qt user interface: main window, presenters, ports and adapters."""
