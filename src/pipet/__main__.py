from pipet.cli import main

main()
