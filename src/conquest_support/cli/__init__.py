"""
conquest_support.cli — Click-based CLI entry point and command handlers.

Commands:
    screen      Render the support screen
    call        Hand a call off to the dialer
    email       Email options: compose, copy, cancel
    blog        Open the Conquest blog
    layout      Header reservation from measured heights
    config      Show, create, validate configuration
    doctor      Environment health check
"""
