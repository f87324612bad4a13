from circulate.cli import main

main()
