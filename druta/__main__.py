from druta.cli import main

main()
