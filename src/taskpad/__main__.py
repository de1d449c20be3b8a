from taskpad.cli.main import main

main()
