from vitals_monitor.dash_app.app import main

main()
