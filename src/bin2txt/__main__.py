from bin2txt.cli import main

main()
